"""
Task subsystem.

Components:
- task_models.py: task variants (Todo, Deadline, Event) and display formatting
- task_list.py: ordered in-memory collection owned by the session
- task_codec.py: one-line text record codec (the on-disk format)
- task_store.py: flat-file storage (full load, full rewrite)
"""
