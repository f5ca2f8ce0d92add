from uritemplate import URITemplate


def is_templated(attributes):
    return bool(attributes.get('templated'))


def variables(href):
    """
    Return the variable names of a URI template in the order they appear,
    e.g. ``['id', 'owner']`` for ``/orders{?id,owner}``.
    """
    if not href:
        return []
    return [name
            for variable in URITemplate(href).variables
            for name in variable.variable_names]


def _stringify(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    return value


def expand(href, bindings):
    """
    Expand ``href`` with ``bindings``. Supports simple ``{var}`` and form-style ``{?a,b}`` expressions;
    variables missing from ``bindings`` are left out of the result.
    """
    bindings = {name: _stringify(value) for name, value in (bindings or {}).items() if value is not None}
    return URITemplate(href).expand(bindings)
