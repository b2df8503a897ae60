"""
Beehively.

- backend/: Post lifecycle API, accounts, database models, configuration
"""
