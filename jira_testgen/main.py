"""Streamlit UI entrypoint."""

from __future__ import annotations

import time

import streamlit as st

from jira_testgen.config import settings
from jira_testgen.core.api_client import BackendClient, BackendError, create_client
from jira_testgen.core.grouping import group_by_scenario
from jira_testgen.core.stories import PRIORITY_COLORS, STATUS_COLORS, UserStory
from jira_testgen.core.testcase_parser import TestCaseRecord
from jira_testgen.exporters import text_exporter
from jira_testgen.utils.logger import configure_logger, logger
from jira_testgen.utils.state import BoardState
from jira_testgen.utils.validators import FIELD_LABELS, build_credentials, missing_credential_fields

PAGE_TITLE = settings.app.name

if settings.app.debug:
    configure_logger(level="DEBUG")


def init_session_state() -> None:
    if "board_state" not in st.session_state:
        st.session_state.board_state = BoardState()
    if "client" not in st.session_state:
        st.session_state.client = create_client()


def _client() -> BackendClient:
    return st.session_state.client


def render_connect_form(state: BoardState) -> None:
    st.title("Jira AI TestCase Generator")
    st.caption("Generate comprehensive test cases from your JIRA user stories with just one click.")

    with st.form("jira_auth"):
        st.subheader("Connect to JIRA")
        domain = st.text_input(FIELD_LABELS["domain"], placeholder="your-company.atlassian.net")
        email = st.text_input(FIELD_LABELS["email"], placeholder="your-email@example.com")
        token = st.text_input(FIELD_LABELS["token"], type="password")
        jira_id = st.text_input("JIRA Project ID", placeholder="PROJ")
        st.markdown("[Create a token](https://id.atlassian.com/manage/api-tokens)")
        submitted = st.form_submit_button("Connect", use_container_width=True)

    if settings.app.demo_mode:
        st.info("Demo mode: sample stories and generated test cases are served locally.")

    if not submitted:
        return

    missing = missing_credential_fields(domain, email, token)
    if missing:
        st.error("Please fill in all fields: " + ", ".join(FIELD_LABELS[name] for name in missing))
        return
    if not jira_id.strip() and not settings.app.demo_mode:
        st.error("Please enter the JIRA project ID")
        return

    try:
        credentials = build_credentials(domain, email, token)
    except ValueError as exc:
        st.error(str(exc))
        return

    client = _client()
    try:
        with st.spinner("Loading JIRA stories..."):
            client.authenticate(credentials)
            stories = client.fetch_stories(credentials, jira_id.strip())
    except BackendError as exc:
        st.error(str(exc))
        return

    state.connect(credentials, jira_id.strip(), stories)
    st.toast("Successfully connected to JIRA")
    st.rerun()


def render_sidebar(state: BoardState) -> None:
    st.sidebar.header("Connection")
    if state.credentials is not None:
        st.sidebar.write(f"**Domain:** {state.credentials.domain}")
        st.sidebar.write(f"**Email:** {state.credentials.email}")
    if state.jira_id:
        st.sidebar.write(f"**Project:** {state.jira_id}")
    st.sidebar.metric("Stories", len(state.stories))
    st.sidebar.metric("Generated", len(state.generations))
    st.sidebar.divider()
    if st.sidebar.button("Change JIRA Account", type="secondary"):
        state.disconnect()
        st.rerun()


def _generate_for(state: BoardState, story: UserStory) -> None:
    start_time = time.time()
    try:
        with st.spinner(f"Generating test cases for {story.id}..."):
            result = _client().generate_test_cases(story)
    except BackendError as exc:
        st.error(str(exc))
        return

    logger.info("Generation for {} took {:.1f}s", story.id, time.time() - start_time)
    state.store_generation(story.id, result)
    st.toast(f"Test cases generated for {story.id}")
    st.rerun()


def render_story(state: BoardState, story: UserStory) -> None:
    with st.container(border=True):
        priority_color = PRIORITY_COLORS.get(story.priority, "gray")
        status_color = STATUS_COLORS.get(story.status, "gray")
        st.markdown(
            f"`{story.id}` :{status_color}[**{story.status}**] :{priority_color}[{story.priority}]"
        )
        st.markdown(f"#### {story.title}")

        details = [f"👤 {story.assignee}"]
        if story.due_date:
            details.append(f"📅 {story.due_date}")
        if story.epic_link:
            details.append(f"🏷️ {story.epic_link}")
        st.caption(" · ".join(details))
        if story.tags:
            st.caption(" ".join(f"`{tag}`" for tag in story.tags))

        with st.expander("Description", expanded=False):
            st.write(story.description or "No description")

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Generate Tests", key=f"generate_{story.id}", use_container_width=True):
                _generate_for(state, story)
        with col2:
            if story.id in state.generations:
                if st.button("View Tests", key=f"view_{story.id}", use_container_width=True):
                    state.selected_story_id = story.id
                    st.rerun()


def render_story_list(state: BoardState) -> None:
    st.title("JIRA User Stories")
    state.search_term = st.text_input(
        "Search",
        value=state.search_term,
        placeholder="Search stories by ID, title or tag...",
    )
    stories = state.filtered_stories()
    if not stories:
        st.info(
            "No user stories match your search criteria. "
            "Try adjusting your search term or refresh the connection to JIRA."
        )
        return
    for story in stories:
        render_story(state, story)


def render_test_case(record: TestCaseRecord) -> None:
    with st.container(border=True):
        header = f"`{record.id}` **{record.title}**"
        if record.priority:
            header += f" · :orange[{record.priority}]"
        st.markdown(header)

        if record.preconditions:
            st.markdown(f"**Preconditions:** {record.preconditions}")
        if record.test_data:
            st.markdown(f"**Test Data:** {record.test_data}")

        st.markdown("**Steps**")
        if record.steps:
            st.markdown("\n".join(f"{number}. {step}" for number, step in enumerate(record.steps, start=1)))
        else:
            st.caption("No steps")

        st.markdown("**Expected Result**")
        st.write(record.expected_result or "—")

        if record.pass_criteria or record.fail_criteria:
            col1, col2 = st.columns(2)
            with col1:
                if record.pass_criteria:
                    st.success(record.pass_criteria)
            with col2:
                if record.fail_criteria:
                    st.error(record.fail_criteria)
        if record.references:
            st.caption(f"References: {record.references}")

        with st.expander("Copy", expanded=False):
            st.code(text_exporter.format_copy_text(record), language=None)


def render_test_cases(state: BoardState) -> None:
    story_id = state.selected_story_id
    result = state.generations.get(story_id) if story_id else None
    if story_id is None or result is None:
        state.close_test_cases()
        st.rerun()
        return

    records = state.test_cases_for(story_id)
    story = state.selected_story()

    st.title("Generated Test Cases")
    st.markdown(f"`{story_id}` **{len(records)} Test Cases** · {result.token_count} tokens")
    if story is not None:
        st.caption(story.title)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "Export",
            data=text_exporter.format_test_cases(records),
            file_name=text_exporter.export_filename(story_id),
            mime="text/plain",
            use_container_width=True,
            disabled=not records,
        )
    with col2:
        st.download_button(
            "Export raw",
            data=result.content,
            file_name=text_exporter.export_filename(story_id, raw=True),
            mime="text/plain",
            use_container_width=True,
        )
    with col3:
        if st.button("Return to Stories", use_container_width=True):
            state.close_test_cases()
            st.rerun()

    st.divider()

    if not records:
        st.warning("No structured test cases were recognised in the generated text.")
        with st.expander("Generated text", expanded=True):
            st.markdown(result.content)
        return

    sections = group_by_scenario(records)
    tabs = st.tabs(["Scenarios", "Raw output"])
    with tabs[0]:
        for section in sections:
            st.subheader(section.heading)
            for record in section.test_cases:
                render_test_case(record)
    with tabs[1]:
        st.markdown(result.content)


def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")
    init_session_state()
    state: BoardState = st.session_state.board_state

    if not state.is_authenticated:
        render_connect_form(state)
        return

    render_sidebar(state)
    if state.selected_story_id:
        render_test_cases(state)
    else:
        render_story_list(state)


if __name__ == "__main__":
    main()
