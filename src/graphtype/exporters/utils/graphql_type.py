def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith("__")
