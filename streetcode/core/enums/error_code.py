"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (malformed or absent input)
- Not-found errors (referenced entity absent)
- Consistency errors (input disagrees with stored state)
- Persistence errors (commit affected nothing or failed)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    FACT_IDS_EMPTY = "fact_ids_empty"
    FACT_IDS_DUPLICATED = "fact_ids_duplicated"
    FACT_FIELD_REQUIRED = "fact_field_required"

    # Not-found errors
    ART_NOT_FOUND = "art_not_found"
    ARTS_NOT_FOUND = "arts_not_found"
    FACT_NOT_FOUND = "fact_not_found"
    FACTS_NOT_FOUND = "facts_not_found"
    FACT_NOT_IN_STREETCODE = "fact_not_in_streetcode"
    IMAGE_NOT_FOUND = "image_not_found"

    # Consistency errors
    FACT_IDS_COUNT_MISMATCH = "fact_ids_count_mismatch"

    # Persistence errors
    FACT_REORDER_NOT_SAVED = "fact_reorder_not_saved"
    FACT_CREATE_NOT_SAVED = "fact_create_not_saved"
    FACT_DELETE_NOT_SAVED = "fact_delete_not_saved"
