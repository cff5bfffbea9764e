"""Screen view-state values."""

from enum import StrEnum


class ViewState(StrEnum):
    """Lifecycle of a screen's data.

    IDLE -> LOADING -> LOADED | LOAD_FAILED
    LOADED -> MUTATING -> MUTATION_SUCCEEDED | MUTATION_FAILED
    """

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    MUTATING = "mutating"
    MUTATION_SUCCEEDED = "mutation_succeeded"
    MUTATION_FAILED = "mutation_failed"


class Screen(StrEnum):
    """Routes known to the navigation shell."""

    SIGN_UP = "SignUp"
    LOGIN = "Login"
    LIST_USERS = "ListUsers"
    POSTS_LIST = "PostifyPostsList"
    ADD_POST = "PostifyAddPostScreen"
    SETTINGS = "Settings"
