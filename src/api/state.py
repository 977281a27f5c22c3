from typing import Union

from storage.task_store import InMemoryTaskStore, PostgresTaskStore

# Swapped for a PostgresTaskStore on startup when USE_DATABASE is enabled.
task_store: Union[InMemoryTaskStore, PostgresTaskStore] = InMemoryTaskStore()
