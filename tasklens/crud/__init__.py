from tasklens.crud.streak_states import crud_streak_state

__all__ = [
    "crud_streak_state",
]
