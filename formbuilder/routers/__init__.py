from formbuilder.routers import (
    collections, data_types, fields, form_fields, form_groups,
    forms, groups, reserved_names, services, submissions, users
)

all_routers = [
    users.router,
    services.router,
    data_types.router,
    groups.router,
    collections.router,
    collections.items_router,
    fields.router,
    forms.router,
    form_fields.router,
    form_groups.router,
    submissions.router,
    submissions.answers_router,
    reserved_names.router,
]
