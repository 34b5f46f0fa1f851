"""
Task subsystem.

Components:
- task_models.py: data structures (Task, OpResult, LoadResult)
- task_codec.py: JSON wire format of the persisted list
- task_store.py: TaskListStore, the in-memory list + persistence mirror
"""
