"""
Address Components
-----------------
Turns a Google-style address_components list into the flat Address fields.
"""

# Component type tag -> Address field
COMPONENT_FIELDS = {
    "route": "street",
    "locality": "city",
    "sublocality": "city",
    "administrative_area_level_1": "state",
    "postal_code": "postcode",
    "country": "country",
}


def parse_address_components(components):
    """
    Pick street, city, state, postcode and country out of address components.

    The first component seen for a field wins; later components of the same
    category are ignored. Entries that are not well-formed are skipped.

    Args:
        components: List of {"long_name": str, "types": [str, ...]} dicts

    Returns:
        dict with the keys street, city, state, postcode, country
    """
    fields = {"street": "", "city": "", "state": "", "postcode": "", "country": ""}
    if not isinstance(components, list):
        return fields

    for component in components:
        if not isinstance(component, dict):
            continue
        name = component.get("long_name")
        types = component.get("types")
        if not isinstance(name, str) or not name or not isinstance(types, list):
            continue
        for component_type in types:
            field = COMPONENT_FIELDS.get(component_type)
            if field and not fields[field]:
                fields[field] = name
    return fields
