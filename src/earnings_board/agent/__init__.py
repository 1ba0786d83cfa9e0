"""Board lifecycle used by the FastAPI server.

Provides `board_lifespan()`, an async context manager that builds the FMP
client, snapshot cache and refresh pipeline, publishes the initial board and
arms the cron refresh job. The FastAPI app calls this from its own lifespan.

Configuration (set in .env):
    - FMP_API_KEY: Financial Modeling Prep key
    - REFRESH_CRON: refresh schedule (default: daily at midnight UTC)
    - DATA_FILE: snapshot path
"""

from earnings_board.agent.lifespan import BoardState, board_lifespan

__all__ = ["BoardState", "board_lifespan"]
