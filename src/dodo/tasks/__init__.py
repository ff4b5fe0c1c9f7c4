"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind)
- date_parser.py: strict YYYY-MM-DD parsing
- task_parser.py: command arguments -> validated Task, index validation
- task_store.py: ordered in-memory collection + canonical sort order
- storage.py: plain text file persistence (load / append / rewrite)
"""
