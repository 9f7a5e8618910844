import os
import sys
import logging
import traceback
import time
import functools
import inspect
import json
from datetime import datetime
from typing import Any, Callable, Optional

LOG_FILE_PREFIX = "sensei_admin"


def setup_logging(base_dir: Optional[str] = None):
    """Set up file logging (plus console logging outside of frozen builds)"""
    if base_dir is None:
        if getattr(sys, 'frozen', False):
            base_dir = os.path.dirname(sys.executable)
        else:
            base_dir = os.path.dirname(os.path.abspath(__file__))

    logs_dir = os.path.join(base_dir, "logs")
    os.makedirs(logs_dir, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = os.path.join(logs_dir, f"{LOG_FILE_PREFIX}_{timestamp}.log")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # Remove all handlers to avoid duplicate output on re-initialization
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    try:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s',
            datefmt='%H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

        if not getattr(sys, 'frozen', False):
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(logging.Formatter(
                '%(levelname)-8s | %(name)-15s | %(message)s'
            ))
            root_logger.addHandler(console_handler)

        logging.info(f"Application started. Log file: {log_file}")
        return log_file

    except OSError as e:
        # Last resort if even logging setup fails
        error_log = os.path.join(base_dir, f"{LOG_FILE_PREFIX}_error.log")
        with open(error_log, "w") as f:
            f.write(f"CRITICAL ERROR SETTING UP LOGGING: {str(e)}\n")
            f.write(traceback.format_exc())
        return error_log


def log_exception(e, message="An error occurred"):
    """Log an exception together with its traceback"""
    logging.error(f"{message}: {str(e)}")
    logging.error(traceback.format_exc())


def serialize_for_logging(obj: Any, max_length: int = 500) -> str:
    """Safely serialize objects for logging with size limits"""
    try:
        if obj is None:
            return "None"
        elif isinstance(obj, (str, int, float, bool)):
            result = str(obj)
        elif isinstance(obj, (list, tuple)):
            if len(obj) > 10:
                result = f"[{', '.join(serialize_for_logging(item, 50) for item in obj[:10])}...] (length: {len(obj)})"
            else:
                result = f"[{', '.join(serialize_for_logging(item, 50) for item in obj)}]"
        elif isinstance(obj, dict):
            if len(obj) > 10:
                items = list(obj.items())[:10]
                result = f"{{{', '.join(f'{k}: {serialize_for_logging(v, 50)}' for k, v in items)}...}} (keys: {len(obj)})"
            else:
                result = f"{{{', '.join(f'{k}: {serialize_for_logging(v, 50)}' for k, v in obj.items())}}}"
        else:
            result = f"<{type(obj).__name__}:{str(obj)[:100]}{'...' if len(str(obj)) > 100 else ''}>"

        if len(result) > max_length:
            result = result[:max_length] + "..."
        return result
    except Exception:
        return f"<{type(obj).__name__}:unprintable>"


def method_logger(
    log_level: int = logging.DEBUG,
    log_inputs: bool = False,
    log_outputs: bool = False,
    log_timing: bool = False,
    log_exceptions: bool = True,
    max_input_length: int = 100,
    max_output_length: int = 100,
    exclude_params: Optional[list] = None
) -> Callable:
    """
    Decorator that logs method calls with optional inputs, outputs and timing

    Args:
        log_level: Logging level to use
        log_inputs: Whether to log method inputs
        log_outputs: Whether to log method outputs
        log_timing: Whether to log execution timing of slow calls
        log_exceptions: Whether to log exceptions (they are always re-raised)
        max_input_length: Maximum length for input serialization
        max_output_length: Maximum length for output serialization
        exclude_params: Parameter names that must never be logged
    """
    if exclude_params is None:
        exclude_params = ['self', 'passphrase', 'password', 'token', 'secret', 'macaroon']

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(func.__module__)
            func_name = f"{func.__qualname__}"
            start_time = time.time()

            input_info = ""
            if log_inputs and (args or kwargs):
                try:
                    bound_args = inspect.signature(func).bind(*args, **kwargs)
                    bound_args.apply_defaults()
                    filtered_args = {
                        k: serialize_for_logging(v, max_input_length)
                        for k, v in bound_args.arguments.items()
                        if k not in exclude_params
                    }
                    if filtered_args:
                        input_info = f" | INPUTS: {json.dumps(filtered_args, default=str)}"
                except TypeError as e:
                    input_info = f" | INPUTS: <serialization_error: {str(e)}>"

            if log_level <= logging.DEBUG:
                logger.log(log_level, f"{func_name}() called{input_info}")

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                execution_time = (time.time() - start_time) * 1000
                if log_exceptions:
                    timing_info = f" ({execution_time:.1f}ms)" if log_timing else ""
                    logger.error(f"{func_name}() failed{timing_info}: {type(e).__name__}: {str(e)}")
                raise

            execution_time = (time.time() - start_time) * 1000

            output_info = ""
            if log_outputs and result is not None and log_level <= logging.DEBUG:
                output_info = f" -> {serialize_for_logging(result, max_output_length)}"

            timing_info = ""
            if log_timing and execution_time > 100:
                timing_info = f" ({execution_time:.1f}ms)"

            if log_level <= logging.DEBUG or execution_time > 100:
                logger.log(log_level, f"{func_name}() completed{timing_info}{output_info}")

            return result

        return wrapper
    return decorator


def class_logger(
    log_level: int = logging.DEBUG,
    exclude_methods: Optional[list] = None,
    exclude_private: bool = True,
    exclude_dunder: bool = True,
    **decorator_kwargs
) -> Callable:
    """
    Class decorator applying method_logger to every public method of a class

    Args:
        log_level: Logging level to use
        exclude_methods: Method names to leave undecorated
        exclude_private: Whether to skip methods starting with _
        exclude_dunder: Whether to skip dunder methods
        **decorator_kwargs: Additional arguments passed to method_logger
    """
    if exclude_methods is None:
        exclude_methods = ['__init__', '__str__', '__repr__']

    def decorator(cls):
        for attr_name, attr in list(vars(cls).items()):
            if not inspect.isfunction(attr):
                continue
            if attr_name in exclude_methods:
                continue
            if exclude_dunder and attr_name.startswith('__') and attr_name.endswith('__'):
                continue
            if exclude_private and attr_name.startswith('_') and not attr_name.startswith('__'):
                continue

            setattr(cls, attr_name, method_logger(log_level=log_level, **decorator_kwargs)(attr))

        return cls
    return decorator
