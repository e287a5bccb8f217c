"""
Journy CLI - track users, accounts, and events from your terminal.

This CLI maps terminal commands onto the journy.io API:
- Upserting and deleting users and accounts
- Managing account membership and user-to-account links
- Tracking events
- Listing properties, segments and events
- Validating the API key and fetching the tracking snippet
"""

__version__ = "1.0.0"
__app_name__ = "Journy.io"
