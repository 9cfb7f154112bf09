"""
Session-based email/password accounts.
"""
