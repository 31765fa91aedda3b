"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from filetree.container import container
from filetree.use_cases.files.list_tree import ListTreeUseCase


def get_list_tree_uc() -> ListTreeUseCase:
    """
    Get the list tree use case from the container.

    Returns:
        ListTreeUseCase: The list tree use case instance
    """
    return container.get_list_tree_use_case()
