from buildezy.domain.vendor import Vendor
from buildezy.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor
