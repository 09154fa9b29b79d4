import os
import streamlit as st
from taskboard.client.api import TaskApiError
from taskboard.client.formatting import format_date
from taskboard.client.hooks import use_tasks

API = os.getenv("API_URL", "http://localhost:8000/api")

st.set_page_config(page_title="Task Manager", layout="centered")


def task_form():
    store = use_tasks(api_url=API)
    with st.form("create_task", clear_on_submit=True):
        title = st.text_input("Title:", max_chars=200)
        description = st.text_area("Description:", max_chars=1000)
        due_date = st.date_input("Due Date:", value=None)
        label = "Adding..." if store.is_creating else "Add Task"
        if st.form_submit_button(label, disabled=store.is_creating):
            if not title.strip():
                st.warning("Title is required.")
                return
            try:
                store.create_task(title, description, due_date)
            except TaskApiError as e:
                st.error(e.message)


@st.dialog("Task")
def task_dialog(task_id: int):
    store = use_tasks(api_url=API)
    try:
        task = store.get_task(task_id)
    except TaskApiError as e:
        st.error(e.message)
        return

    st.subheader(task["title"])
    st.caption("Description")
    st.write(task["description"] or "No description provided")
    st.caption("Due Date")
    st.write(format_date(task["dueDate"]))
    st.caption("Status")
    st.write("Completed" if task["status"] == "completed" else "Pending")

    busy = store.is_updating or store.is_deleting
    toggle_label = "Mark Complete" if task["status"] == "pending" else "Mark Pending"
    confirm = st.checkbox("Are you sure you want to delete this task?")
    col1, col2 = st.columns(2)
    with col1:
        if st.button(toggle_label, disabled=busy, use_container_width=True):
            new_status = "completed" if task["status"] == "pending" else "pending"
            try:
                store.update_task_status(task["id"], new_status)
            except TaskApiError as e:
                st.error(e.message)
                return
            st.rerun()
    with col2:
        if st.button("Delete", type="primary", disabled=busy or not confirm, use_container_width=True):
            try:
                store.delete_task(task["id"])
            except TaskApiError as e:
                st.error(e.message)
                return
            st.rerun()


def task_list():
    store = use_tasks(api_url=API)
    tasks = store.tasks
    if store.error is not None:
        st.error(f"Error loading tasks: {store.error}")
        return
    if not tasks:
        st.info("No tasks yet. Add one above.")
        return
    for task in tasks:
        col1, col2, col3 = st.columns([3, 2, 1])
        with col1:
            if st.button(task["title"], key=f"task-{task['id']}", use_container_width=True):
                task_dialog(task["id"])
        col2.write(format_date(task["dueDate"]))
        col3.write("✅" if task["status"] == "completed" else "⏳")


store = use_tasks(api_url=API)
if store.is_stale:
    store.refetch()
if store.error is not None:
    st.error(f"Error loading tasks: {store.error}")
    st.stop()

st.title("Task Manager")
st.write("Organize your tasks efficiently.")
task_form()
st.subheader("Tasks")
task_list()
