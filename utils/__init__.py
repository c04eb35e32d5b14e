from utils.get_endpoint import get_endpoint
from utils.response_utils import robust_parse_text, handle_result, handle_error, error_message

__all__ = ["get_endpoint", "robust_parse_text", "handle_result", "handle_error", "error_message"]
