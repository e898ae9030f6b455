"""Generate the HTML for FilterableTable."""

import numbers
import pathlib

import jinja2

from .. import _config
from .. import _dataframe as sbd
from . import _utils
from ._column_filters import SUBSTRING_MATCH, column_kinds

_DEFAULT_RENDER_OPTIONS = {
    "page_size": None,
    "sortable": True,
    "searchable": False,
    "striped": False,
    "highlight": True,
    "bordered": False,
    "compact": False,
    "title": None,
}

_BOOL_RENDER_OPTIONS = [
    "sortable",
    "searchable",
    "striped",
    "highlight",
    "bordered",
    "compact",
]

_DOWNLOAD_BUTTON_LABEL = "Download as CSV"


def check_render_options(render_options):
    """Validate the options passed through to the table renderer.

    Returns the full set of options, with defaults filled in.
    """
    unknown = set(render_options) - set(_DEFAULT_RENDER_OPTIONS)
    if unknown:
        raise ValueError(
            f"Unknown render option(s): {sorted(map(str, unknown))}. Available"
            f" options are {list(_DEFAULT_RENDER_OPTIONS)}."
        )
    options = _DEFAULT_RENDER_OPTIONS | dict(render_options)
    if options["page_size"] is None:
        options["page_size"] = _config.get_config()["page_size"]
    page_size = options["page_size"]
    if (
        isinstance(page_size, bool)
        or not isinstance(page_size, numbers.Integral)
        or page_size <= 0
    ):
        raise ValueError(f"'page_size' must be a positive integer, got {page_size!r}.")
    options["page_size"] = int(page_size)
    for option_name in _BOOL_RENDER_OPTIONS:
        if not isinstance(options[option_name], bool):
            raise ValueError(
                f"{option_name!r} must be a boolean, got {options[option_name]!r}."
            )
    if options["title"] is not None and not isinstance(options["title"], str):
        raise ValueError(
            f"'title' must be a string or None, got {options['title']!r}."
        )
    return options


def _get_jinja_env():
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(
            pathlib.Path(__file__).resolve().parent / "_data" / "templates",
            encoding="UTF-8",
        ),
        autoescape=True,
    )
    return env


def _column_config(df, col_name, kind, column_filter):
    config = {
        "name": str(col_name),
        "kind": kind.value,
        "filter_method": SUBSTRING_MATCH,
        "filter_input": None,
    }
    if column_filter is not None:
        dropdown = column_filter.filter_input.render(
            sbd.col(df, col_name), str(col_name)
        )
        for option in dropdown["options"]:
            option["value"] = _utils.to_json_value(option["value"])
        config["filter_method"] = column_filter.filter_method
        config["filter_input"] = dropdown
    return config


def table_config(df, columns=None, filterable=True, element_id=None, **render_options):
    """Build the configuration consumed by the table's script.

    Parameters
    ----------
    df : pandas or polars DataFrame
        The data to show.
    columns : dict or None
        Maps column names to :class:`ColumnFilterConfig`. Columns that are not
        in the mapping use the default (substring) filter.
    filterable : bool
        Whether the table has a row of filter inputs below its header.
    element_id : str
        Id of the table element, used by ``ReportkitTable.setFilter`` and
        ``ReportkitTable.downloadDataCSV`` to find the table.
    **render_options
        See ``check_render_options``.

    Returns
    -------
    dict
        Contains ``element_id``, ``filterable``, ``options``, ``columns`` (one
        dict per column, with its name, kind, filter method and filter input)
        and ``rows`` (a list of lists of JSON-compatible values).
    """
    columns = columns if columns is not None else {}
    options = check_render_options(render_options)
    kinds = column_kinds(df)
    col_names = sbd.column_names(df)
    column_values = [
        [_utils.to_json_value(v) for v in sbd.to_list(sbd.col(df, c))]
        for c in col_names
    ]
    return {
        "element_id": element_id,
        "filterable": bool(filterable),
        "options": options,
        "columns": [
            _column_config(df, c, kinds[c], columns.get(c)) for c in col_names
        ],
        "rows": [list(row) for row in zip(*column_values)],
    }


def render_table(df, columns=None, filterable=True, element_id=None, **render_options):
    """Render the interactive table as an HTML fragment.

    The parameters are the same as for ``table_config``. The table body is
    filled in the browser by ``filterable-table.js``, from the configuration
    stored (base64-encoded JSON) in the ``data-config`` attribute.
    """
    config = table_config(
        df,
        columns=columns,
        filterable=filterable,
        element_id=element_id,
        **render_options,
    )
    template = _get_jinja_env().get_template("table.html")
    return template.render(
        {"config": config, "base64_config": _utils.b64_encode(config)}
    )


def to_html(table_html, element_id, csv_file_name, standalone=True, title=None):
    """Wrap a rendered table with its "Download as CSV" button.

    Parameters
    ----------
    table_html : str
        The output of ``render_table``.
    element_id : str
        Id of the table the button exports.
    csv_file_name : str
        Name of the downloaded file.
    standalone : bool, default=True
        Whether to generate a full HTML page (``standalone=True``), or only an
        HTML fragment which can be inserted into another page or the output of
        a jupyter notebook cell (``standalone=False``).
    title : str, default=None
        Title of the page, only used when ``standalone=True``.

    Returns
    -------
    str
        The HTML.
    """
    jinja_env = _get_jinja_env()
    if standalone:
        template = jinja_env.get_template("standalone-table.html")
    else:
        template = jinja_env.get_template("inline-table.html")
    return template.render(
        {
            "table_html": table_html,
            "element_id": element_id,
            "csv_file_name": csv_file_name,
            "download_button_label": _DOWNLOAD_BUTTON_LABEL,
            "title": title,
        }
    )
