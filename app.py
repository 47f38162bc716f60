import logging
import os
import sys
from pathlib import Path

import streamlit as st

# Add current directory to path
sys.path.append(str(Path(__file__).parent))

from database import SessionLocal, init_db
from dashboard import render_expense_form, render_expense_list, render_insights, render_savings_goal
from store import FinanceStore

# --- Configuration ---
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
st.set_page_config(page_title="Personal Finance Manager", layout="wide", page_icon="💰")

# --- Database Session ---
init_db()

if "db" not in st.session_state:
    st.session_state.db = SessionLocal()

if "store" not in st.session_state:
    st.session_state.store = FinanceStore(st.session_state.db).load()

store: FinanceStore = st.session_state.store

# --- Main App ---
st.title("💰 Personal Finance Manager")
st.caption("Take control of your finances with intelligent expense tracking, savings goals, and smart predictions")

left, middle, right = st.columns(3)

with left:
    render_expense_form(store)
    st.divider()
    render_savings_goal(store)

with middle:
    render_expense_list(store.expenses)

with right:
    render_insights(store.insights(), store.expenses)
