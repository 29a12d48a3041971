import streamlit as st


def seed_section(key: str) -> int:
    st.subheader("Random seed")
    return st.number_input("Random seed", min_value=0, value=0, key=key)


__all__ = ["seed_section"]
