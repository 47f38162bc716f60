# dashboard.py — presentation helpers and Streamlit render functions

from typing import Dict, List, Optional, Tuple

import pandas as pd
import plotly.express as px
import streamlit as st

from categorizer import CATEGORIES, OTHER
from insights import expenses_to_df
from models import Expense
from store import FinanceStore, StoreError

# (background, text) per category; unknown labels use the "Other" pair
CATEGORY_COLORS: Dict[str, Tuple[str, str]] = {
    "Food & Dining": ("#FFEDD5", "#9A3412"),
    "Transportation": ("#DBEAFE", "#1E40AF"),
    "Shopping": ("#F3E8FF", "#6B21A8"),
    "Entertainment": ("#FCE7F3", "#9D174D"),
    "Bills & Utilities": ("#FEE2E2", "#991B1B"),
    "Education": ("#DCFCE7", "#166534"),
    "Health & Fitness": ("#CCFBF1", "#115E59"),
    "Other": ("#F3F4F6", "#1F2937"),
}


def category_color(category: Optional[str]) -> Tuple[str, str]:
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS[OTHER])


def format_currency(amount: float) -> str:
    return f"${amount:.2f}"


def savings_progress(goal: float, current: float) -> float:
    """Percent of the goal reached. Not clamped; 0 when no goal is set."""
    return (current / goal) * 100 if goal > 0 else 0.0


def display_progress(goal: float, current: float) -> float:
    return min(max(savings_progress(goal, current), 0.0), 100.0)


def savings_remaining(goal: float, current: float) -> float:
    return goal - current


def total_spent(expenses: List[Expense]) -> float:
    return float(sum(e.amount for e in expenses))


def category_badge(category: str) -> str:
    bg, fg = category_color(category)
    return (
        f'<span style="background-color:{bg}; color:{fg}; padding:2px 8px; '
        f'border-radius:9999px; font-size:12px">{category}</span>'
    )


def cat_spend(expenses: List[Expense]):
    """
    Donut chart of spending by category.
    """
    df = expenses_to_df(expenses)
    by_cat = df.groupby('Category')['Amount'].sum().reset_index()

    color_map = {c: CATEGORY_COLORS[c][1] for c in CATEGORIES}
    fig = px.pie(
        by_cat,
        values='Amount',
        names='Category',
        hole=0.4,
        title="Spending by Category",
        color='Category',
        color_discrete_map=color_map,
    )
    fig.update_traces(textposition='inside', textinfo='percent+label')
    return fig

# --- Streamlit sections ---

def render_expense_form(store: FinanceStore):
    st.subheader("➕ Add New Expense")
    with st.form("add_expense", clear_on_submit=True):
        description = st.text_input("Description", placeholder="What did you spend on?")
        amount = st.text_input("Amount ($)", placeholder="0.00")

        if st.form_submit_button("Add Expense", use_container_width=True):
            try:
                expense = store.add_expense(description, amount)
            except StoreError as err:
                st.error(f"**{err.title}**: {err.message}")
            else:
                st.success(f"{format_currency(expense.amount)} expense added to {expense.category}")


def render_savings_goal(store: FinanceStore):
    st.subheader("🎯 Savings Goal")
    # forms run first so the summary above them reflects this submission
    summary = st.container()

    col_goal, col_save = st.columns(2)
    with col_goal:
        with st.form("set_goal", clear_on_submit=True):
            goal_input = st.text_input("Set Savings Goal", placeholder="Enter goal amount")
            if st.form_submit_button("Set Goal", use_container_width=True):
                try:
                    new_goal = store.set_goal(goal_input)
                except StoreError as err:
                    st.error(f"**{err.title}**: {err.message}")
                else:
                    st.success(f"Your new savings goal is {format_currency(new_goal)}")

    with col_save:
        with st.form("add_savings", clear_on_submit=True):
            savings_input = st.text_input("Add to Savings", placeholder="Amount saved")
            if st.form_submit_button("Add Savings", use_container_width=True):
                try:
                    before = store.current_savings
                    after = store.add_savings(savings_input)
                except StoreError as err:
                    st.error(f"**{err.title}**: {err.message}")
                else:
                    st.success(f"Added {format_currency(after - before)} to your savings")

    goal = store.savings_goal
    current = store.current_savings
    with summary:
        col1, col2 = st.columns(2)
        col1.metric("Current Savings", format_currency(current))
        col2.metric("Goal", format_currency(goal) if goal > 0 else "Not set")

        if goal > 0:
            progress = savings_progress(goal, current)
            st.caption(f"Progress: {progress:.1f}%")
            st.progress(display_progress(goal, current) / 100)

            remaining = savings_remaining(goal, current)
            if remaining > 0:
                st.caption(f"{format_currency(remaining)} left to reach your goal")
            else:
                st.caption("🎉 Goal achieved! Consider setting a new goal.")


def render_expense_list(expenses: List[Expense]):
    st.subheader(f"🧾 Recent Expenses · Total: {format_currency(total_spent(expenses))}")

    if not expenses:
        st.info("No expenses yet. Add your first expense above!")
        return

    for expense in expenses:
        left, right = st.columns([3, 1])
        left.markdown(
            f"**{expense.description}**<br>{category_badge(expense.category)} "
            f"<small>{expense.date:%Y-%m-%d}</small>",
            unsafe_allow_html=True,
        )
        right.markdown(f"**{format_currency(expense.amount)}**")


def render_insights(insights: dict, expenses: List[Expense]):
    prediction = insights.get("prediction")
    if prediction is not None:
        st.subheader("🔮 Spending Prediction")
        st.metric("Predicted next expense", format_currency(prediction))
        st.caption("Based on your most recent spending.")

    st.subheader("🚦 Financial Alerts")
    for alert in insights.get("alerts", []):
        st.markdown(
            f"""
            <div style="padding:12px; background-color:#f8fafc; border-radius:10px; margin-bottom:8px; border:1px solid #e2e8f0">{alert}</div>
            """,
            unsafe_allow_html=True,
        )

    top = insights.get("top_categories", [])
    if top:
        st.subheader("📊 Top Spending Categories")
        st.dataframe(
            pd.DataFrame(top, columns=["Category", "Total"]).assign(
                Total=lambda x: x["Total"].map(format_currency)
            ),
            hide_index=True,
            use_container_width=True,
        )
        st.plotly_chart(cat_spend(expenses), use_container_width=True)
