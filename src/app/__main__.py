"""Permite executar o Sistema com ``python -m app``."""

from app.app import main

main()
