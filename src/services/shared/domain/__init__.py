from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    CancellationWindowExpiredException as CancellationWindowExpiredException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InsufficientInventoryException as InsufficientInventoryException,
)
from .exception import (
    InvalidDateRangeException as InvalidDateRangeException,
)
from .exception import (
    InventoryShortage as InventoryShortage,
)
from .exception import (
    InventoryUpdateFailedException as InventoryUpdateFailedException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    StoreException as StoreException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository
