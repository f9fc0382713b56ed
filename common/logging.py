import numpy as np


def log_matrix_summary(logger, matrix):
    logger.info("=== Correlation Matrix ===")
    logger.info("Shape: %s", matrix.shape)
    values = matrix.data
    if values.size == 0:
        logger.info("Matrix is empty")
        return

    nonzero = np.count_nonzero(values)
    logger.info("Non-zero entries: %s", f"{nonzero:,}")
    logger.info("Density: %.4f%%", 100 * nonzero / values.size)
    logger.info(f"Min value: {values.min():.4f}")
    logger.info(f"Max value: {values.max():.4f}")
    logger.info(f"Mean value: {values.mean():.4f}")


def log_average_statistics(logger, predictor):
    logger.info(f"=== {type(predictor).__name__} ===")
    logger.info("Entity type: %s", predictor.entity_type.value)
    logger.info("Max entity id: %s", predictor.max_entity_id)
    logger.info("Ratings seen: %s", f"{predictor.global_count:,}")
    if predictor.global_count == 0:
        logger.warning("⚠️  No ratings seen, global average is undefined")
        return

    logger.info(f"Global average: {predictor.global_average:.4f}")

    counts = predictor.entity_counts
    averages = predictor.entity_averages
    observed = averages[counts > 0]
    logger.info(f"Entities with ratings: {len(observed):,} / {len(counts):,}")
    logger.info(f"Ratings per entity min/max/mean: {counts.min()} / {counts.max()} / {counts.mean():.2f}")
    logger.info(f"Entity average min/max: {observed.min():.4f} / {observed.max():.4f}")

    unobserved = len(counts) - len(observed)
    if unobserved > 0:
        logger.warning(f"⚠️  {unobserved} entity ids in range have no ratings, they fall back to the global average")


def log_evaluation_report(logger, report):
    logger.info("=" * 80)
    logger.info("RATING PREDICTION EVALUATION")
    logger.info("=" * 80)
    logger.info(f"{'Metric':<12} {'Value':>12}")
    logger.info("-" * 80)
    for metric in ("rmse", "mae", "coverage"):
        logger.info(f"{metric.upper():<12} {report[metric]:>12.4f}")
    logger.info(f"{'COUNT':<12} {report['count']:>12,}")
