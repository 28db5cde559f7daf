from .wrapper import JSONWrapper, Strategy, find_json_object

__all__ = ["JSONWrapper", "Strategy", "find_json_object"]
