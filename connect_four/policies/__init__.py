from .action_policy import ActionPolicy

__all__ = ["ActionPolicy"]
