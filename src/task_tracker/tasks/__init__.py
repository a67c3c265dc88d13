"""
Task subsystem.

Components:
- task_models.py: the Task record
- errors.py: TaskError hierarchy with the user-facing messages
- task_store.py: in-memory storage + id assignment
- task_service.py: validation and higher-level operations (the public entry point)
- task_api.py: process-wide default store/service pair
"""
