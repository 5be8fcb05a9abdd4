import threading

import pytest
from botocore.exceptions import ClientError


def version_item(name, version, last_modified):
    return {'FunctionName': name, 'Version': version, 'LastModified': last_modified}


def client_error(operation):
    return ClientError({'Error': {'Code': 'ServiceException', 'Message': 'boom'}}, operation)


class FakeLambda:
    """In-memory stand-in for the Lambda API, paging every listing by `page_size`."""

    def __init__(self, page_size=2):
        self.page_size = page_size
        self.functions = {}
        self.calls = []
        self.failing_deletes = set()
        self.lock = threading.Lock()

    def add_function(self, name, versions=(), aliases=()):
        self.functions[name] = {
            'versions': [version_item(name, v, t) for v, t in versions],
            'aliases': [{'Name': alias, 'FunctionVersion': v} for alias, v in aliases],
        }

    def record(self, *call):
        with self.lock:
            self.calls.append(call)

    def page(self, items, key, marker):
        start = int(marker) if marker else 0
        end = start + self.page_size
        response = {key: items[start:end]}
        if end < len(items):
            response['NextMarker'] = str(end)

        return response

    def list_functions(self, Marker=None):
        self.record('list_functions', Marker)
        items = [{'FunctionName': name} for name in self.functions]
        return self.page(items, 'Functions', Marker)

    def list_versions_by_function(self, FunctionName, Marker=None):
        self.record('list_versions_by_function', FunctionName, Marker)
        return self.page(self.functions[FunctionName]['versions'], 'Versions', Marker)

    def list_aliases(self, FunctionName, Marker=None):
        self.record('list_aliases', FunctionName, Marker)
        return self.page(self.functions[FunctionName]['aliases'], 'Aliases', Marker)

    def delete_function(self, FunctionName, Qualifier):
        self.record('delete_function', FunctionName, Qualifier)
        if (FunctionName, Qualifier) in self.failing_deletes:
            raise client_error('DeleteFunction')

    def deleted(self, name=None):
        return sorted(
            call[2] for call in self.calls
            if call[0] == 'delete_function' and (name is None or call[1] == name)
        )

    def touched(self):
        return {call[1] for call in self.calls if call[0] != 'list_functions'}


@pytest.fixture
def fake_lambda():
    return FakeLambda()


# svc: $LATEST plus versions 1 (oldest) to 5 (newest)
SVC_VERSIONS = [
    ('$LATEST', '2024-05-06T00:00:00.000+0000'),
    ('1', '2024-05-01T00:00:00.000+0000'),
    ('2', '2024-05-02T00:00:00.000+0000'),
    ('3', '2024-05-03T00:00:00.000+0000'),
    ('4', '2024-05-04T00:00:00.000+0000'),
    ('5', '2024-05-05T00:00:00.000+0000'),
]


@pytest.fixture
def svc_versions():
    return list(SVC_VERSIONS)
