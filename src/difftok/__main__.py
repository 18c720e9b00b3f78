# src/difftok/__main__.py
from difftok.cli import main

main()
