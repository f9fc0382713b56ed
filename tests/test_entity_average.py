import numpy as np
import pytest

from common.exceptions import GlobalAverageUndefined
from rating_prediction import EntityType, ItemAverage, Rating, Ratings, UserAverage


@pytest.fixture
def ratings():
    # (user, item, value)
    return Ratings.from_records([(0, 1, 4.0), (1, 1, 2.0), (0, 2, 5.0)])


@pytest.fixture
def item_average(ratings):
    predictor = ItemAverage()
    predictor.train(ratings)
    return predictor


def test_item_average_predictions(item_average):
    assert item_average.predict(1) == pytest.approx(3.0)
    assert item_average.predict(2) == pytest.approx(5.0)
    assert item_average.global_average == pytest.approx(11 / 3)


def test_unknown_entity_gets_global_average(item_average):
    assert not item_average.can_predict(3)
    assert item_average.predict(3) == item_average.global_average
    assert item_average.predict(1000) == item_average.global_average


def test_can_predict_is_a_range_check(item_average):
    # item 0 never rated but lies inside the observed id range
    assert item_average.can_predict(0)
    assert item_average.can_predict(2)
    assert not item_average.can_predict(-1)


def test_unrated_entity_in_range_falls_back(item_average):
    assert np.isnan(item_average.entity_average(0))
    assert item_average.predict(0) == item_average.global_average


def test_entity_averages_keep_sum_count_invariant(item_average):
    sums = item_average.entity_sums
    counts = item_average.entity_counts
    averages = item_average.entity_averages
    np.testing.assert_array_equal(counts, [0, 2, 1])
    np.testing.assert_allclose(averages[counts > 0], sums[counts > 0] / counts[counts > 0])
    assert np.isnan(averages[0])


def test_train_on_zero_ratings_fails():
    predictor = ItemAverage()
    with pytest.raises(GlobalAverageUndefined):
        predictor.train(Ratings.from_records([]))
    assert not predictor.is_trained


def test_untrained_global_average_is_undefined():
    predictor = ItemAverage()
    assert not predictor.can_predict(0)
    with pytest.raises(GlobalAverageUndefined):
        predictor.predict(0)


def test_incremental_update_matches_retraining(ratings, item_average):
    item_average.incremental_update(2, 1.0)

    retrained = ItemAverage()
    retrained.train(Ratings.from_records(list(ratings) + [Rating(3, 2, 1.0)]))

    assert item_average.predict(2) == pytest.approx(retrained.predict(2))
    assert item_average.predict(1) == pytest.approx(retrained.predict(1))
    assert item_average.global_average == pytest.approx(retrained.global_average)


def test_incremental_update_extends_range(item_average):
    item_average.incremental_update(6, 2.0)

    assert item_average.max_entity_id == 6
    assert item_average.can_predict(6)
    assert item_average.predict(6) == pytest.approx(2.0)
    assert item_average.predict(4) == pytest.approx(13 / 4)
    assert item_average.global_count == 4


def test_incremental_update_before_training():
    predictor = ItemAverage()
    predictor.incremental_update(0, 4.0)
    predictor.incremental_update(0, 5.0)

    assert predictor.is_trained
    assert predictor.predict(0) == pytest.approx(4.5)
    assert predictor.global_average == pytest.approx(4.5)


def test_incremental_update_rejects_negative_id(item_average):
    with pytest.raises(ValueError):
        item_average.incremental_update(-1, 3.0)
    assert item_average.global_count == 3


def test_add_ratings(ratings):
    predictor = ItemAverage()
    predictor.add_ratings(ratings)

    trained = ItemAverage()
    trained.train(ratings)
    np.testing.assert_allclose(predictor.entity_sums, trained.entity_sums)
    np.testing.assert_array_equal(predictor.entity_counts, trained.entity_counts)


def test_retrain_replaces_state(item_average):
    item_average.train(Ratings.from_records([(0, 0, 1.0)]))
    assert item_average.max_entity_id == 0
    assert item_average.predict(0) == pytest.approx(1.0)
    assert item_average.predict(1) == pytest.approx(1.0)


def test_user_average(ratings):
    predictor = UserAverage()
    predictor.train(ratings)

    assert predictor.entity_type == EntityType.USER
    assert predictor.predict(0) == pytest.approx(4.5)
    assert predictor.predict(1) == pytest.approx(2.0)
    assert predictor.predict(2) == pytest.approx(11 / 3)


def test_predict_many(item_average):
    np.testing.assert_allclose(item_average.predict_many([1, 2, 9]), [3.0, 5.0, 11 / 3])
