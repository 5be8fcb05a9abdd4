def list_all(operation, key, **kwargs):
    """Collects every item across all pages of a marker-paginated Lambda listing.

    Args:
        operation: A client method such as `client.list_functions` that accepts
          an optional `Marker` and returns a response with an optional `NextMarker`.
        key: Response key holding the page's items (e.g., 'Functions').
        **kwargs: Passed through to every page request (e.g., FunctionName).

    Returns:
        A list of items in the order the server returned them.
    """
    items = []
    marker = None

    while True:
        params = dict(kwargs)
        if marker:
            params['Marker'] = marker

        response = operation(**params)
        items.extend(response.get(key, []))

        marker = response.get('NextMarker')
        if not marker:
            return items


def list_functions(client):
    return list_all(client.list_functions, 'Functions')


def list_versions(client, function_name):
    return list_all(client.list_versions_by_function, 'Versions', FunctionName=function_name)


def list_aliases(client, function_name):
    return list_all(client.list_aliases, 'Aliases', FunctionName=function_name)
