"""
Command Line Interface Package

Unified CLI for the Pondo client.

Command Structure:
- pondo: Main entry point with utility commands (version, config)
- pondo login / register / logout: Session management
- pondo dashboard / summary: Ledger overview screens
- pondo income / expense: List and record transactions
- pondo budget: Category limits and spend against them
- pondo goal: Saving goal and contributions
- pondo settings: Display currency

Every command builds its own session from the current configuration, runs
the matching view controller once and prints the result.
"""
