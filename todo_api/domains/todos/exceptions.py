class TodoError(Exception):
    """Base class for expected, recoverable todo store failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TodoConflictError(TodoError):
    """A todo with the same title already exists"""

    def __init__(self, title: str):
        super().__init__(f"Todo with title: '{title}' already exists")
        self.title = title


class TodoNotFoundError(TodoError):
    """No todo matches the given id"""

    def __init__(self, todo_id: str):
        super().__init__(f"Todo with ID: {todo_id} not found")
        self.todo_id = todo_id
