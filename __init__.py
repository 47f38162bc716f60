"""Personal Finance Manager package.

A small Streamlit expense tracker: keyword categorization, a savings goal
and quick spending insights.  See ``app.py`` for the entry point and
``insights.py`` for the derived statistics.
"""
