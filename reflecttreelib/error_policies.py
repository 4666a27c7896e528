"""
Error handling policies for ReflectTreeLib.

Reading a payload's members runs arbitrary user code (properties, custom
``__reflect_fields__`` hooks, pydantic extras). Policies decide what happens
when that code raises: the search engine itself never fails, so the default
policy turns the failure into "this value has no members".
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Dict

logger = logging.getLogger(__name__)


def _describe_node(node: Any) -> str:
    """Short description of the node that failed, for records and logs."""
    payload = getattr(node, 'payload', node)
    return type(payload).__name__


class ErrorPolicy(ABC):
    """
    Base class for reflection error policies.

    Subclasses implement different strategies for handling errors raised
    while an adapter reads a payload.
    """

    @abstractmethod
    def handle(self, error: Exception, method_name: str, node: Any) -> Any:
        """
        Handle an error that occurred while reflecting a node.

        Args:
            error: The exception that was raised
            method_name: Adapter method that failed (e.g., 'get_fields')
            node: The node being reflected when the error occurred

        Returns:
            A default that lets the search continue (an empty member list),
            or re-raises the exception to stop the search.
        """
        pass

    def _record(self, error: Exception, method_name: str, node: Any) -> Dict[str, Any]:
        return {
            'type': _describe_node(node),
            'method': method_name,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the search.

    Useful while developing a producer of object trees, where a broken
    property should be loud rather than silently hiding a subtree.
    """

    def handle(self, error: Exception, method_name: str, node: Any) -> Any:
        """Re-raise the error immediately."""
        raise error


class SkipUnreflectablePolicy(ErrorPolicy):
    """
    Policy that logs errors and treats the failing value as having no members.

    This is the default. The most recent errors are kept for later
    inspection; records hold the error type and message, not the exception,
    so failing payloads are not kept alive.
    """

    def __init__(self, verbose: bool = True, max_errors: int = 100):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning when an error occurs
            max_errors: How many recent error records to keep
        """
        self.errors: Deque[Dict[str, Any]] = deque(maxlen=max_errors)
        self.error_count = 0
        self.by_type: Dict[str, int] = {}
        self.verbose = verbose

    def handle(self, error: Exception, method_name: str, node: Any) -> Any:
        """Log the error and return an empty member list."""
        record = self._record(error, method_name, node)
        self.errors.append(record)
        self.error_count += 1
        self.by_type[record['type']] = self.by_type.get(record['type'], 0) + 1

        if self.verbose:
            logger.warning(
                "Could not reflect %s in %s: %s: %s",
                record['type'], method_name, record['error_type'], error
            )

        return []

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': self.error_count,
            'by_type': dict(self.by_type),
            'errors': list(self.errors),
        }


class CollectErrorsPolicy(SkipUnreflectablePolicy):
    """
    Policy that collects all errors without logging.

    Similar to SkipUnreflectablePolicy but silent. Useful for collecting
    errors and presenting them at the end.
    """

    def __init__(self, max_errors: int = 100):
        """Initialize the policy."""
        super().__init__(verbose=False, max_errors=max_errors)
