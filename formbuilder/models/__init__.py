# Import every model so Base.metadata knows all tables before create_all
from formbuilder.models.user import User
from formbuilder.models.service import Service
from formbuilder.models.data_type import DataType
from formbuilder.models.group import Group
from formbuilder.models.collection import Collection, CollectionItem
from formbuilder.models.field import Field
from formbuilder.models.form import Form
from formbuilder.models.form_group import FormGroup
from formbuilder.models.form_field import FormField
from formbuilder.models.submission import Submission, FormAnswer
from formbuilder.models.reserved_name import ReservedName

__all__ = [
    "User",
    "Service",
    "DataType",
    "Group",
    "Collection",
    "CollectionItem",
    "Field",
    "Form",
    "FormGroup",
    "FormField",
    "Submission",
    "FormAnswer",
    "ReservedName",
]
