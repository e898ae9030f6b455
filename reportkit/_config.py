import numbers
import os
import threading
from contextlib import contextmanager

_global_config = {
    "page_size": int(os.environ.get("RKT_PAGE_SIZE", 10)),
    "download_file_name": os.environ.get("RKT_DOWNLOAD_FILE_NAME", "download"),
    "filter_all_label": os.environ.get("RKT_FILTER_ALL_LABEL", "All"),
    "browser_timeout": float(os.environ.get("RKT_BROWSER_TIMEOUT", 5)),
}
_threadlocal = threading.local()


def _get_threadlocal_config():
    """The configuration of the current thread, created from the global one."""
    if not hasattr(_threadlocal, "global_config"):
        _threadlocal.global_config = _global_config.copy()
    return _threadlocal.global_config


def get_config():
    """Get the reportkit configuration of the current thread.

    Returns
    -------
    config : dict
        A copy of the configuration; modify it with :func:`set_config`.

    See Also
    --------
    config_context : Context manager for global reportkit configuration.
    set_config : Set global reportkit configuration.

    Examples
    --------
    >>> import reportkit
    >>> reportkit.get_config()["page_size"]  # doctest: +SKIP
    10
    """
    return _get_threadlocal_config().copy()


def _check_non_empty_string(param_name, value):
    if not isinstance(value, str) or not value:
        raise ValueError(f"{param_name!r} must be a non-empty string, got {value!r}.")


def set_config(
    page_size=None,
    download_file_name=None,
    filter_all_label=None,
    browser_timeout=None,
):
    """Set global reportkit configuration.

    Parameters
    ----------
    page_size : int, default=None
        Default number of rows shown on each page of a
        :class:`~reportkit.FilterableTable`. Default is 10.

        This configuration can also be set with the ``RKT_PAGE_SIZE``
        environment variable.

    download_file_name : str, default=None
        Base name of the CSV file used when the requested download name is
        empty after removing the characters that are not allowed in file
        names. Default is ``"download"``.

        This configuration can also be set with the ``RKT_DOWNLOAD_FILE_NAME``
        environment variable.

    filter_all_label : str, default=None
        Label of the dropdown option that clears a categorical column filter.
        Default is ``"All"``.

        This configuration can also be set with the ``RKT_FILTER_ALL_LABEL``
        environment variable.

    browser_timeout : float, default=None
        Number of seconds :meth:`FilterableTable.open` waits for the web
        browser to fetch the page. Default is 5.

        This configuration can also be set with the ``RKT_BROWSER_TIMEOUT``
        environment variable.

    See Also
    --------
    get_config : Get the current configuration.
    config_context : Context manager for global reportkit configuration.

    Examples
    --------
    >>> from reportkit import set_config
    >>> set_config(page_size=25)  # doctest: +SKIP
    """
    local_config = _get_threadlocal_config()

    if page_size is not None:
        if (
            isinstance(page_size, bool)
            or not isinstance(page_size, numbers.Integral)
            or page_size <= 0
        ):
            raise ValueError(
                f"'page_size' must be a positive integer, got {page_size!r}."
            )
        local_config["page_size"] = int(page_size)

    if download_file_name is not None:
        _check_non_empty_string("download_file_name", download_file_name)
        local_config["download_file_name"] = download_file_name

    if filter_all_label is not None:
        _check_non_empty_string("filter_all_label", filter_all_label)
        local_config["filter_all_label"] = filter_all_label

    if browser_timeout is not None:
        if not isinstance(browser_timeout, numbers.Real) or browser_timeout <= 0:
            raise ValueError(
                f"'browser_timeout' must be a positive number, got {browser_timeout!r}."
            )
        local_config["browser_timeout"] = browser_timeout


@contextmanager
def config_context(
    *,
    page_size=None,
    download_file_name=None,
    filter_all_label=None,
    browser_timeout=None,
):
    """Context manager for global reportkit configuration.

    The parameters are the same as for :func:`set_config`. The previous
    configuration is restored when leaving the context.

    Yields
    ------
    None.

    See Also
    --------
    get_config : Get the current configuration.
    set_config : Set global reportkit configuration.

    Examples
    --------
    >>> import reportkit
    >>> with reportkit.config_context(page_size=50):
    ...     ...  # doctest: +SKIP
    """
    original_config = get_config()
    set_config(
        page_size=page_size,
        download_file_name=download_file_name,
        filter_all_label=filter_all_label,
        browser_timeout=browser_timeout,
    )

    try:
        yield
    finally:
        set_config(**original_config)
