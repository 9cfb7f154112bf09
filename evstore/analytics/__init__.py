"""
Preference-usage analytics for the recommendation endpoint.
"""
