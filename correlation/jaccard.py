from .binary_correlation import BinaryCorrelation, register_binary_correlation


@register_binary_correlation("jaccard")
class Jaccard(BinaryCorrelation):
    """
    Jaccard index, also called the Tanimoto coefficient.

    http://en.wikipedia.org/wiki/Jaccard_index
    """

    @property
    def is_symmetric(self) -> bool:
        return True

    def compute_from_overlap(self, overlap: float, count_x: float, count_y: float) -> float:
        # No shared evidence scores 0, even where the union is non-zero
        if overlap != 0:
            return overlap / (count_x + count_y - overlap)
        return 0.0
