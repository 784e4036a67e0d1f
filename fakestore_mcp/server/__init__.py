from .dispatcher import ToolDispatcher, success_result, error_result

__all__ = ['ToolDispatcher', 'success_result', 'error_result']
