import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait


logger = logging.getLogger(__name__)

MAX_WORKERS = 2


def delete_version(client, version):
    logger.info(f'deleting {version.qualified_name}')

    client.delete_function(
        FunctionName=version.function_name,
        Qualifier=version.version,
    )


def delete_versions(client, versions, max_workers=MAX_WORKERS, dry_run=False):
    to_delete = []
    for version in versions:
        if version.keep:
            logger.info(f'keeping {version.qualified_name}')
        else:
            to_delete.append(version)

    if dry_run:
        for version in to_delete:
            logger.info(f'would delete {version.qualified_name}')

        return to_delete

    if not to_delete:
        return to_delete

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(delete_version, client, version): version for version in to_delete}
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)

        # Deletes that already started can't be stopped, only the queued ones.
        for future in not_done:
            if future.cancel():
                logger.info(f'skipped {futures[future].qualified_name}')

        for future in done:
            future.result()

    return to_delete
