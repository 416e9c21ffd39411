"""
Utilities for MongoDB ObjectId conversion.
Handles conversion between ObjectId and string formats.
"""

from typing import Optional, Union

from bson import ObjectId
from bson.errors import InvalidId


def objectid_to_str(obj_id: Union[ObjectId, str, None]) -> Optional[str]:
    """
    Convert ObjectId to string.

    Examples:
        >>> objectid_to_str(ObjectId("507f1f77bcf86cd799439011"))
        '507f1f77bcf86cd799439011'
        >>> objectid_to_str(None)
        None
    """
    if obj_id is None:
        return None

    if isinstance(obj_id, ObjectId):
        return str(obj_id)

    if isinstance(obj_id, str):
        return obj_id

    raise TypeError(f"Cannot convert {type(obj_id)} to ObjectId string")


def str_to_objectid(obj_id_str: Union[str, ObjectId]) -> ObjectId:
    """
    Convert string to ObjectId.

    Raises:
        ValueError: If string is not a valid ObjectId format

    Examples:
        >>> str_to_objectid("507f1f77bcf86cd799439011")
        ObjectId('507f1f77bcf86cd799439011')
    """
    if isinstance(obj_id_str, ObjectId):
        return obj_id_str

    try:
        return ObjectId(obj_id_str)
    except (InvalidId, TypeError):
        raise ValueError(f"Invalid ObjectId string: {obj_id_str}")


def is_valid_objectid(obj_id_str: Union[str, ObjectId, None]) -> bool:
    """
    Check if string is a valid ObjectId format.

    Examples:
        >>> is_valid_objectid("507f1f77bcf86cd799439011")
        True
        >>> is_valid_objectid("invalid")
        False
    """
    if obj_id_str is None:
        return False
    return ObjectId.is_valid(obj_id_str)
