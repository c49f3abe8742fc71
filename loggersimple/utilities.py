import functools
import json
import logging
import pathlib
import typing

import pydantic
import tabulate

logger = logging.getLogger(__name__)


def find_first_instance_of_file(
    file_names: list[str] | str, check_user_space: bool = True
) -> pathlib.Path | None:
    """Look for a file in the current directory, then the home directory

    Parameters
    ----------
    file_names : list[str] | str
        candidate names of file to locate
    check_user_space: bool, optional
        check the users home area if no file is found in the current
        working directory. Default is True.

    Returns
    -------
    pathlib.Path | None
        first matching file if found
    """
    if isinstance(file_names, str):
        file_names = [file_names]

    for file_name in file_names:
        _user_file = pathlib.Path.cwd().joinpath(file_name)
        if _user_file.exists():
            return _user_file

    if check_user_space:
        for file_name in file_names:
            _user_file = pathlib.Path.home().joinpath(file_name)
            if _user_file.exists():
                return _user_file

    return None


def parse_pydantic_error(error: pydantic.ValidationError) -> str:
    out_table: list[list[typing.Any]] = []
    for data in json.loads(error.json()):
        _input = data.get("input", "<hidden>")
        _input_str = f"{_input}"
        if len(_input_str) > 50:
            _input_str = f"{_input_str[:50]}..."

        out_table.append(
            [
                _input_str,
                ".".join(f"{loc}" for loc in data["loc"]),
                data["type"],
                data["msg"],
            ]
        )
    err_table = tabulate.tabulate(
        out_table,
        headers=["Input", "Location", "Type", "Message"],
        tablefmt="fancy_grid",
    )
    return f"`{error.title}` Validation:\n{err_table}"


def prettify_pydantic(class_func: typing.Callable) -> typing.Callable:
    """Converts pydantic validation errors to a table

    Parameters
    ----------
    class_func : typing.Callable
        function to wrap

    Returns
    -------
    typing.Callable
        wrapped function

    Raises
    ------
    RuntimeError
        the formatted validation error
    """

    @functools.wraps(class_func)
    def wrapper(self, *args, **kwargs) -> typing.Any:
        try:
            return class_func(self, *args, **kwargs)
        except pydantic.ValidationError as e:
            error_str = parse_pydantic_error(e)
            raise RuntimeError(error_str) from e

    return wrapper
