import codecs
import functools
from pathlib import Path

from .. import _dataframe as sbd
from .._dispatch import raise_dispatch_unregistered_type
from .._utils import get_duplicates, new_element_id
from ._column_filters import ColumnKind, column_kinds, make_column_filters
from ._html import check_render_options, render_table, table_config, to_html
from ._serve import open_in_browser
from ._utils import sanitize_file_name, to_json

_MISSING_CATEGORY = ""


def _check_dataframe(dataframe):
    if sbd.is_column(dataframe):
        dataframe = sbd.to_frame(dataframe)
    if not sbd.is_dataframe(dataframe):
        raise_dispatch_unregistered_type(dataframe, kind="DataFrame or Series")
    duplicates = get_duplicates(sbd.column_names(dataframe))
    if duplicates:
        raise ValueError(
            f"Found duplicated column names: {duplicates}. Column names must be"
            " unique to attach a filter to each column."
        )
    return dataframe


def _check_categorical_columns(dataframe, categorical_columns):
    if categorical_columns is None:
        return []
    if isinstance(categorical_columns, str):
        categorical_columns = [categorical_columns]
    categorical_columns = list(categorical_columns)
    all_names = sbd.column_names(dataframe)
    missing = [c for c in categorical_columns if c not in all_names]
    if missing:
        raise ValueError(
            f"'categorical_columns' contains columns that are not in the"
            f" dataframe: {missing}."
        )
    return categorical_columns


def _prepare_categories(dataframe, categorical_columns):
    """Convert ``categorical_columns`` and fill missing values in all categories.

    Missing values become the ``""`` category, so that they can be selected in
    the column's dropdown filter.
    """
    for col_name in categorical_columns:
        column = sbd.to_categorical(sbd.col(dataframe, col_name))
        dataframe = sbd.set_column(dataframe, col_name, column)
    for col_name, kind in column_kinds(dataframe).items():
        if kind is ColumnKind.CATEGORICAL:
            column = sbd.fill_null_category(
                sbd.col(dataframe, col_name), _MISSING_CATEGORY
            )
            dataframe = sbd.set_column(dataframe, col_name, column)
    return dataframe


class FilterableTable:
    r"""Display a dataframe as an interactive table with a CSV download button.

    The table is split into pages and can be sorted by clicking on a column
    header. Below the header, each column has a filter: categorical columns
    get a dropdown listing the categories present in the data (rows are kept
    when their value is exactly the selected one) and the other columns get a
    text box (rows are kept when their value contains the text, ignoring
    case). The "Download as CSV" button below the table downloads the rows
    that pass the filters, from all pages.

    Parameters
    ----------
    dataframe : pandas or polars DataFrame or Series
        The data to display. Columns containing lists or other nested values
        are not supported.
    download_file_name : str, default="download"
        Name of the downloaded file, without the ``.csv`` extension.
        Characters that are not allowed in file names are removed; if nothing
        is left, the ``download_file_name`` configuration is used instead
        (see :func:`set_config`).
    categorical_columns : str or list of str, default=None
        Columns to convert to a categorical dtype before building the table,
        so that they get a dropdown filter. Columns that already have a
        categorical dtype (pandas ``category``, polars ``Categorical`` or
        ``Enum``) always get one.
    id_generator : callable, default=None
        Called without arguments to get the id of the table element, which
        must be unique in the page. By default, a process-wide generator
        returns ``"reactable-<token>-<counter>"``.
    **render_options
        Passed to the table renderer: ``page_size`` (int, defaults to the
        ``page_size`` configuration), ``sortable`` (default True),
        ``searchable`` (show a search box for all columns, default False),
        ``striped`` (default False), ``highlight`` (highlight the row under the
        mouse, default True), ``bordered`` (default False), ``compact``
        (default False) and ``title`` (str, default None).

    Attributes
    ----------
    dataframe : DataFrame
        The displayed data, where missing values in categorical columns have
        been replaced with the ``""`` category.
    element_id : str
        Id of the table element.
    download_file_name : str
        The sanitized file name, without extension.
    csv_file_name : str
        The name of the downloaded file.
    column_kinds : dict
        Maps column names to their :class:`ColumnKind`.
    column_filters : dict or None
        Maps the name of each categorical column to its
        :class:`ColumnFilterConfig`; None if there is no categorical column.
    render_options : dict
        The options passed to the renderer, with defaults filled in.

    See Also
    --------
    filterable_table :
        Function equivalent to this class.

    Examples
    --------
    >>> import pandas as pd
    >>> from reportkit import FilterableTable
    >>> df = pd.DataFrame(
    ...     {
    ...         "id": [1, 2, 3],
    ...         "medication": pd.Categorical(["aspirin", None, "aspirin"]),
    ...     }
    ... )
    >>> table = FilterableTable(df, download_file_name="medications")
    >>> table
    <FilterableTable: use .open() to display>
    >>> table.csv_file_name
    'medications.csv'
    >>> list(table.column_filters)
    ['medication']
    >>> [option["label"] for option in table.filter_options()["medication"]]
    ['All', 'aspirin', '']

    If you are in a Jupyter notebook, to display the table just have it be the
    last expression evaluated in a cell. Outside of a notebook, open it in a
    web browser with ``table.open()``, or get the HTML:

    >>> table.html()
    '<!DOCTYPE html>\n<html lang="en-US">...'
    """

    def __init__(
        self,
        dataframe,
        download_file_name="download",
        categorical_columns=None,
        id_generator=None,
        **render_options,
    ):
        self.render_options = check_render_options(render_options)
        dataframe = _check_dataframe(dataframe)
        categorical_columns = _check_categorical_columns(dataframe, categorical_columns)
        self.dataframe = _prepare_categories(dataframe, categorical_columns)
        self.csv_file_name = sanitize_file_name(download_file_name, extension=".csv")
        self.download_file_name = self.csv_file_name[: -len(".csv")]
        self.element_id = new_element_id(id_generator)
        self.column_kinds = column_kinds(self.dataframe)
        self.column_filters = make_column_filters(
            self.dataframe, self.element_id, self.column_kinds
        )

    def __repr__(self):
        return f"<{self.__class__.__name__}: use .open() to display>"

    def filter_options(self):
        """The options of each dropdown filter.

        Returns
        -------
        dict :
            Maps each categorical column name to a list of ``{"label": str,
            "value": object}`` dicts. The first item is the option that clears
            the filter, its value is None.
        """
        if self.column_filters is None:
            return {}
        return {
            col_name: config.filter_input.render(
                sbd.col(self.dataframe, col_name), str(col_name)
            )["options"]
            for col_name, config in self.column_filters.items()
        }

    def _renderer_kwargs(self):
        return {
            "columns": self.column_filters,
            "filterable": True,
            "element_id": self.element_id,
            **self.render_options,
        }

    @functools.cached_property
    def _table_html(self):
        return render_table(self.dataframe, **self._renderer_kwargs())

    def html(self):
        """Get the table as a full HTML page.

        Returns
        -------
        str :
            The HTML page.
        """
        return to_html(
            self._table_html,
            self.element_id,
            self.csv_file_name,
            standalone=True,
            title=self.render_options["title"],
        )

    def html_snippet(self):
        """Get the table as an HTML fragment that can be inserted in a page.

        Returns
        -------
        str :
            The HTML snippet.
        """
        return to_html(
            self._table_html,
            self.element_id,
            self.csv_file_name,
            standalone=False,
        )

    def json(self):
        """Get the configuration and data of the table in JSON format.

        Returns
        -------
        str :
            The JSON data.
        """
        return to_json(table_config(self.dataframe, **self._renderer_kwargs()))

    def _repr_mimebundle_(self, include=None, exclude=None):
        del include, exclude
        return {"text/html": self.html_snippet()}

    def _repr_html_(self):
        return self._repr_mimebundle_()["text/html"]

    def write_html(self, file):
        """Store the table into an HTML file.

        Parameters
        ----------
        file : str, pathlib.Path or file object
            The file object or path of the file to store the HTML output.
        """
        html = self.html()
        if isinstance(file, (str, Path)):
            with open(file, "w", encoding="utf8") as stream:
                stream.write(html)
            return

        try:
            # The write mode of the file object is unknown: try bytes first.
            file.write(html.encode("utf-8"))
            return
        except TypeError:
            pass

        if (encoding := getattr(file, "encoding", None)) is not None:
            try:
                encoding_name = codecs.lookup(encoding).name
            except LookupError:  # pragma: no cover
                encoding_name = None
            if encoding_name != "utf-8":
                raise ValueError(
                    "If `file` is a text file it should use utf-8 encoding; got:"
                    f" {encoding!r}"
                )
        file.write(html)

    def open(self):
        """Open the HTML table in a web browser."""
        open_in_browser(self.html())


def filterable_table(
    dataframe,
    download_file_name="download",
    categorical_columns=None,
    id_generator=None,
    **render_options,
):
    """Display a dataframe as a filterable table with a CSV download button.

    This is the same as ``FilterableTable(dataframe, ...)``; see
    :class:`FilterableTable` for the description of the parameters.

    Returns
    -------
    FilterableTable
        Displayed directly in notebooks; use its ``open`` method otherwise.

    Examples
    --------
    >>> import polars as pl  # doctest: +SKIP
    >>> from reportkit import filterable_table
    >>> df = pl.DataFrame(
    ...     {"grade": ["A", "B", None]}, schema={"grade": pl.Categorical}
    ... )  # doctest: +SKIP
    >>> filterable_table(df, "grades").csv_file_name  # doctest: +SKIP
    'grades.csv'
    """
    return FilterableTable(
        dataframe,
        download_file_name=download_file_name,
        categorical_columns=categorical_columns,
        id_generator=id_generator,
        **render_options,
    )
