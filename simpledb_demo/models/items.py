"""
Item Models for SimpleDB

SimpleDB stores items as a name plus a bag of attribute name/value pairs.
These models validate the write side of that shape and render it into the
structure boto3 expects for BatchPutAttributes:

    {'Name': 'cust_001',
     'Attributes': [{'Name': 'first_name', 'Value': 'John', 'Replace': True}, ...]}

Also home to the fixed customer sample records used by the demo run.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Customer attribute names
FIRST_NAME_ATTR = "first_name"
LAST_NAME_ATTR = "last_name"
EMAIL_ATTR = "email"

# SimpleDB limits item names, attribute names and attribute values to 1024 bytes
MAX_FIELD_BYTES = 1024


def _check_utf8_length(v: str) -> str:
    size = len(v.encode("utf-8"))
    if size > MAX_FIELD_BYTES:
        raise ValueError(f"must be at most {MAX_FIELD_BYTES} bytes in UTF-8, got {size}")
    return v


class ReplaceableAttribute(BaseModel):
    """Single attribute write; ``replace`` overwrites existing values of the same name."""

    name: str = Field(..., min_length=1, description="Attribute name")
    value: str = Field(..., description="Attribute value")
    replace: bool = Field(True, description="Replace existing values instead of appending")

    model_config = ConfigDict(frozen=True)

    @field_validator('name', 'value')
    @classmethod
    def validate_size(cls, v):
        return _check_utf8_length(v)

    def to_request(self) -> Dict[str, Any]:
        return {'Name': self.name, 'Value': self.value, 'Replace': self.replace}


class ReplaceableItem(BaseModel):
    """Item write for BatchPutAttributes."""

    name: str = Field(..., min_length=1, description="Unique item name within the domain")
    attributes: List[ReplaceableAttribute] = Field(..., min_length=1, description="Attributes to put, in order")

    model_config = ConfigDict(frozen=True)

    @field_validator('name')
    @classmethod
    def validate_size(cls, v):
        return _check_utf8_length(v)

    def get(self, attribute_name: str) -> Optional[str]:
        """Return the value of the first attribute with this name, if any."""
        for attribute in self.attributes:
            if attribute.name == attribute_name:
                return attribute.value
        return None

    def to_request(self) -> Dict[str, Any]:
        """Render in the boto3 ``Items`` element shape."""
        return {
            'Name': self.name,
            'Attributes': [attribute.to_request() for attribute in self.attributes],
        }

    @classmethod
    def with_attributes(cls, name: str, replace: bool = True, **attributes: str) -> 'ReplaceableItem':
        """Build an item from keyword attributes, preserving keyword order."""
        return cls(
            name=name,
            attributes=[
                ReplaceableAttribute(name=attr_name, value=value, replace=replace)
                for attr_name, value in attributes.items()
            ],
        )


def _customer(item_name: str, first_name: str, last_name: str, email: str) -> ReplaceableItem:
    return ReplaceableItem(
        name=item_name,
        attributes=[
            ReplaceableAttribute(name=FIRST_NAME_ATTR, value=first_name, replace=True),
            ReplaceableAttribute(name=LAST_NAME_ATTR, value=last_name, replace=True),
            ReplaceableAttribute(name=EMAIL_ATTR, value=email, replace=True),
        ],
    )


def build_sample_records() -> List[ReplaceableItem]:
    """Return the four sample customers inserted by the demo.

    A new list is built on every call; the contents never change.
    """
    return [
        _customer("cust_001", "John", "Doe", "john@example.com"),
        _customer("cust_002", "Jane", "Doe", "jane@example.com"),
        _customer("cust_003", "Mary", "Smith", "mary@example.com"),
        _customer("cust_004", "Bob", "Smith", "bob@example.com"),
    ]
