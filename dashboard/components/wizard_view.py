"""Widgets shared by the buyer and seller onboarding pages."""
from typing import Callable, Optional

import streamlit as st

from dashboard.common import queue_notification, show_notification
from src.onboarding.wizard import WizardController

# Dashboard page for each route a finished wizard redirects to
ROUTE_PAGES = {
    "/dashboard": "pages/2_matches.py",
}


def get_controller(state_key: str, factory: Callable[[], WizardController]) -> WizardController:
    """Fetch the page's controller from session state, creating it on first visit."""
    if state_key not in st.session_state:
        st.session_state[state_key] = factory()
    return st.session_state[state_key]


def render_stepper(controller: WizardController) -> None:
    """Render progress bar and step indicators."""
    st.progress(controller.progress())

    cols = st.columns(len(controller.steps))
    for index, (col, step) in enumerate(zip(cols, controller.steps)):
        with col:
            if index < controller.current_step:
                st.markdown(f"✅ ~~{step.title}~~")
            elif index == controller.current_step:
                st.markdown(f"**{step.title}**")
            else:
                st.markdown(step.title)
            st.caption(step.description)

    st.divider()


def _show_error(controller: WizardController, name: str) -> None:
    error = controller.field_error(name)
    if error:
        st.error(error)


def text_field(
    controller: WizardController,
    name: str,
    label: str,
    placeholder: str = "",
) -> None:
    """Text input bound to a draft field."""
    current = controller.draft.get(name)
    value = st.text_input(label, value=current, placeholder=placeholder, key=f"{controller.definition.role}_{name}")
    if value != current:
        controller.update_field(name, value)
    _show_error(controller, name)


def select_field(
    controller: WizardController,
    name: str,
    label: str,
    options: list[str],
    format_func: Optional[Callable[[str], str]] = None,
) -> None:
    """Select box bound to a draft field; "" means nothing selected."""
    current = controller.draft.get(name)
    choices = [""] + list(options)
    value = st.selectbox(
        label,
        choices,
        index=choices.index(current) if current in choices else 0,
        format_func=lambda v: "Select..." if v == "" else (format_func(v) if format_func else v),
        key=f"{controller.definition.role}_{name}",
    )
    if value != current:
        controller.update_field(name, value)
    _show_error(controller, name)


def checkbox_group(
    controller: WizardController,
    name: str,
    label: str,
    options: list[str],
    columns: int = 3,
) -> None:
    """Grid of checkboxes toggling membership of a multi-select field."""
    st.markdown(f"**{label}**")
    selected = controller.draft.get(name)
    cols = st.columns(columns)
    for i, option in enumerate(options):
        with cols[i % columns]:
            checked = st.checkbox(
                option,
                value=option in selected,
                key=f"{controller.definition.role}_{name}_{option}",
            )
        if checked != (option in selected):
            selected = controller.toggle_option(name, option, checked)
    _show_error(controller, name)


def render_review(controller: WizardController) -> None:
    """Show the confirmed values grouped by section."""
    sections = controller.review_sections()
    cols = st.columns(2)
    for i, section in enumerate(sections):
        with cols[i % 2]:
            st.subheader(section.title)
            for label, value in section.rows:
                if isinstance(value, list):
                    st.markdown(" ".join(f"`{v}`" for v in value) or "-")
                else:
                    st.markdown(f"**{label}:** {value}")


def render_navigation(controller: WizardController, done_key: str) -> None:
    """Back / Next / Complete Registration buttons."""
    col1, col2 = st.columns(2)
    with col1:
        if st.button("← Back", disabled=controller.is_first_step):
            controller.prev_step()
            st.rerun()
    with col2:
        label = "Complete Registration" if controller.is_last_step else "Next →"
        if st.button(label, type="primary"):
            result = controller.next_step()
            if result is not None:
                if result.success:
                    st.session_state[done_key] = True
                page = ROUTE_PAGES.get(result.redirect_to)
                if page is not None:
                    queue_notification(result.notification)
                    st.switch_page(page)
                show_notification(result.notification)
            st.rerun()
