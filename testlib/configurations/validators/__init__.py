from .data import check_all_core_config, check_all_http_config

__all__ = ("check_all_core_config", "check_all_http_config")
