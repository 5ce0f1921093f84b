"""Interactive console front end for the roster address book."""
