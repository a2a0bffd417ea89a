from typing import List, Optional

from faker import Faker

from opensearch_ingest.dtos.article_dto import ArticleDTO
from opensearch_ingest.dtos.document_dto import DocumentDTO
from opensearch_ingest.dtos.tag_dto import TagDTO
from opensearch_ingest.generators.abstract_classes import ABCDocumentSource

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class FakeDocumentSource(ABCDocumentSource):
    """
    Generate synthetic documents with Faker.

    Ages fall in 5-50 and heights in 140-180; tag and article lists hold
    between 0 and ``max_slice_size`` entries.
    """

    def __init__(self, seed: Optional[int] = None, max_slice_size: int = 20):
        """
        Args:
            seed (int, optional): Seed for reproducible documents.
            max_slice_size (int): Upper bound for the length of nested lists.
        """
        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)
        self.max_slice_size = max_slice_size

    def next_batch(self, count: int) -> List[DocumentDTO]:
        return [self.make_document() for _ in range(count)]

    def make_document(self) -> DocumentDTO:
        fake = self.faker
        return DocumentDTO(
            email=fake.email(),
            password=fake.password(),
            name=fake.name(),
            age=fake.random_int(min=5, max=50),
            height=fake.random_int(min=140, max=180),
            phone_number=fake.phone_number(),
            latitude=float(fake.latitude()),
            longitude=float(fake.longitude()),
            tags=self._make_tags(),
            articles=[self._make_article() for _ in range(self._slice_length())],
        )

    def _make_article(self) -> ArticleDTO:
        fake = self.faker
        return ArticleDTO(
            id=fake.uuid4(),
            title=fake.sentence(),
            body=fake.paragraph(),
            created_at=fake.date_time().strftime(TIMESTAMP_FORMAT),
            tags=self._make_tags(),
        )

    def _make_tags(self) -> List[TagDTO]:
        return [TagDTO(name=self.faker.word()) for _ in range(self._slice_length())]

    def _slice_length(self) -> int:
        return self.faker.random_int(min=0, max=self.max_slice_size)
