"""
Task subsystem.

Components:
- task_models.py: Task plus its Todo/Deadline/Event payloads
- task_list.py: ordered in-memory collection with query helpers
- line_codec.py: single-line text encoding with escaping
- task_store.py: flat-file load/save with atomic replace
"""
