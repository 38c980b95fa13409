from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ExtractionStats:
    total_links: int = 0
    unique_content: int = 0
    duplicate_content_detected: int = 0
    tokens_saved: int = 0
    compression_ratio: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)
