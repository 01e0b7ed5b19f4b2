"""DronePath Streamlit UI."""
