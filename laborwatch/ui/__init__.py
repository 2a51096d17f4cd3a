"""
UI Package for the LaborWatch Dashboard.

This package contains the Streamlit contraction timer page and its
Plotly visualizations.

Usage:
    streamlit run laborwatch/ui/app.py
"""
