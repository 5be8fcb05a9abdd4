from datetime import datetime


LATEST = '$LATEST'
KEEP_COUNT = 3

# Lambda reports LastModified like 2024-05-01T12:30:45.123+0000
TIMESTAMP_FORMATS = ('%Y-%m-%dT%H:%M:%S.%f%z', '%Y-%m-%dT%H:%M:%S%z')


def parse_timestamp(value):
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    return datetime.fromisoformat(value)


class FunctionVersion:
    def __init__(self, function_name, version, last_modified, keep=False):
        self.function_name = function_name
        self.version = version
        self.last_modified = last_modified
        self.keep = keep

    def __repr__(self):
        return f'FunctionVersion({self.function_name}:{self.version}, keep={self.keep})'

    @classmethod
    def from_api(cls, item):
        return cls(item['FunctionName'], item['Version'], item['LastModified'])

    @property
    def qualified_name(self):
        return f'{self.function_name}:{self.version}'

    def sort_key(self):
        modified = parse_timestamp(self.last_modified)

        # on equal timestamps, higher version numbers win and $LATEST beats them all
        number = int(self.version) if self.version.isdigit() else float('inf')

        return modified, number


def select_retained(versions, aliased, keep_count=KEEP_COUNT):
    """Marks which versions of one function survive a prune.

    $LATEST and every alias target are always kept. Of the remaining versions,
    the `keep_count` most recently modified are kept and the rest are marked
    for deletion.

    Returns the versions sorted newest first, each with `keep` set.
    """
    aliased = set(aliased)
    ordered = sorted(versions, key=lambda v: v.sort_key(), reverse=True)

    kept = 0
    for version in ordered:
        if version.version == LATEST or version.version in aliased:
            version.keep = True
        elif kept < keep_count:
            version.keep = True
            kept += 1
        else:
            version.keep = False

    return ordered
