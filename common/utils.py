import logging
import os


def setup_logging(module_name: str, log_file: str, level=logging.INFO):
    """Configure logging for a module.

    Args:
        module_name: Name for the logger (typically __name__)
        log_file: Path to the log file to write to
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(module_name)
    logger.handlers.clear()

    # Disable propagation to root logger to prevent duplicate logging
    logger.propagate = False

    logger.setLevel(level)

    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    # File Handler
    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(file_handler)

    return logger


def build_index_mapping(raw_ids):
    """
    Map raw ids to contiguous 0-based indices in order of first appearance.

    Returns:
        id_to_idx: dict mapping raw id → index
        idx_to_id: dict mapping index → raw id
    """
    id_to_idx = {}
    for raw_id in raw_ids:
        if raw_id not in id_to_idx:
            id_to_idx[raw_id] = len(id_to_idx)

    # Reverse mapping: index → raw id
    idx_to_id = {idx: raw_id for raw_id, idx in id_to_idx.items()}
    return id_to_idx, idx_to_id
