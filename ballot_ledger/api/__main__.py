"""Run the Ballot Ledger API with uvicorn.

Usage:
    python -m ballot_ledger.api
"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "ballot_ledger.api.main:app",
        host=os.getenv("LEDGER_HOST", "127.0.0.1"),
        port=int(os.getenv("LEDGER_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
