"""Run the server: python -m earnings_board."""

from earnings_board.cli import main

main()
