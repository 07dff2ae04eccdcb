from buildezy.domain.enquiry import Enquiry
from buildezy.repositories.base import BaseRepository


class EnquiryRepository(BaseRepository[Enquiry]):
    model = Enquiry
