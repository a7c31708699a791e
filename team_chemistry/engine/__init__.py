"""Team chemistry engine.

Sub-modules:
- compatibility  – pairwise type chemistry (overrides, axis formula, grades, role tips)
- pairs          – all-pairs chemistry for a roster
- team_insights  – member / team rollups, key connector, best triple
- team_type      – team archetype classification
"""
