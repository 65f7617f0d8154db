"""Fine-grained operation labels per component category."""

from typing import Optional

from accelgate.util.exceptions import UnknownComponentTypeError

ARITHMETIC_OPERATION_TYPES = ("random_compute", "gated_compute")

STORAGE_OPERATION_TYPES = (
    "random_read",
    "random_fill",
    "random_update",
    "gated_read",
    "gated_fill",
    "gated_update",
    "metadata_read",
    "gated_metadata_read",
    "metadata_fill",
    "gated_metadata_fill",
)

NETWORK_OPERATION_TYPES = ("transfer",)

_OPERATION_TYPES = {
    "arithmetic": ARITHMETIC_OPERATION_TYPES,
    "storage": STORAGE_OPERATION_TYPES,
    "network": NETWORK_OPERATION_TYPES,
}


def get_operation_types(component_type: str) -> tuple[str, ...]:
    try:
        return _OPERATION_TYPES[component_type]
    except KeyError:
        raise UnknownComponentTypeError(
            f"Unknown component type {component_type!r}. Known types: "
            f"{list(_OPERATION_TYPES)}"
        ) from None


def get_num_op_types(component_type: Optional[str] = None) -> int:
    """Number of fine-grained operation types of a component category.

    Without a category, components are assumed to have a single operation type.
    """
    if component_type is None:
        return 1
    return len(get_operation_types(component_type))
