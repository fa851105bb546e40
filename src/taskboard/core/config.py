"""配置常量模块 -- 可通过环境变量覆盖

包含分页默认值、字段长度限制等可配置常量。
"""

import os

import structlog

log = structlog.get_logger()


def _int_from_env(name: str, default: int, minimum: int | None = None) -> int:
    """读取整数环境变量，非法值或小于 minimum 时回退默认值"""
    val = os.environ.get(name)
    if not val:
        return default
    try:
        parsed = int(val)
    except ValueError:
        log.warning("invalid_int_config", env_var=name, value=val, fallback=default)
        return default
    if minimum is not None and parsed < minimum:
        log.warning(
            "int_config_below_minimum",
            env_var=name,
            value=parsed,
            minimum=minimum,
            fallback=default,
        )
        return default
    return parsed


def load_page_limits() -> tuple[int, int]:
    """读取分页条数配置

    默认条数超过上限时截断到上限。

    Returns:
        (default_limit, max_limit)
    """
    max_limit = _int_from_env("TASKBOARD_MAX_PAGE_LIMIT", 100, minimum=1)
    default_limit = _int_from_env("TASKBOARD_DEFAULT_PAGE_LIMIT", 10, minimum=1)
    if default_limit > max_limit:
        log.warning(
            "default_page_limit_clamped",
            env_var="TASKBOARD_DEFAULT_PAGE_LIMIT",
            value=default_limit,
            clamped_to=max_limit,
        )
        default_limit = max_limit
    return default_limit, max_limit


# 列表查询默认页码
DEFAULT_PAGE: int = 1

# 列表查询默认每页条数 / 每页条数上限
DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT = load_page_limits()

# 字段长度限制（由校验层执行，Store 不校验）
TITLE_MIN_LENGTH: int = 3
TITLE_MAX_LENGTH: int = 50
DESCRIPTION_MIN_LENGTH: int = 3
DESCRIPTION_MAX_LENGTH: int = 255
