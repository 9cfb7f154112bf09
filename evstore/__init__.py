"""
Backend for the EV storefront demo.

Responsibilities:
- Load the vehicle catalog once per process.
- Score and rank vehicles against a visitor's preferences.
- Serve accounts, orders, recommendation history and analytics over HTTP.
"""
