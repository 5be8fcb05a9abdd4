import logging

from lambdaprune.deletion import delete_versions
from lambdaprune.pagination import list_aliases, list_functions, list_versions
from lambdaprune.retention import KEEP_COUNT, FunctionVersion, select_retained


logger = logging.getLogger(__name__)


def prune_function(client, function_name, keep_count=KEEP_COUNT, dry_run=False):
    versions = [FunctionVersion.from_api(item) for item in list_versions(client, function_name)]
    aliased = {alias['FunctionVersion'] for alias in list_aliases(client, function_name)}

    logger.info(f'found {len(versions)} versions of {function_name}, aliased {sorted(aliased)}')

    selected = select_retained(versions, aliased, keep_count=keep_count)

    return delete_versions(client, selected, dry_run=dry_run)


def prune(client, prefix, keep_count=KEEP_COUNT, dry_run=False):
    # Functions are handled one at a time; the first failure stops the run.
    names = [function['FunctionName'] for function in list_functions(client)]
    matching = [name for name in names if name.startswith(prefix)]

    logger.info(f'{len(matching)} of {len(names)} functions match prefix "{prefix}"')

    deleted = {}
    for name in matching:
        logger.info(name)
        deleted[name] = len(prune_function(client, name, keep_count=keep_count, dry_run=dry_run))

    return deleted
