from .dynamodb import is_conditional_check_failure, scan_all, to_int

__all__ = ["is_conditional_check_failure", "scan_all", "to_int"]
