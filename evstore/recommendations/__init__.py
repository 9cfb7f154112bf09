"""
Vehicle recommendation engine.

Responsibilities:
- Validate a visitor's preferences (budget, commute, passengers, style, priority).
- Score every catalog vehicle with a fixed, ordered set of weighted rules.
- Rank candidates and shape the top matches for API serialisation.
- Keep a per-user history of recommendation runs.
"""
