from infra.constructs.api import Api as Api
from infra.constructs.database import Database as Database
from infra.constructs.deployment import Deployment as Deployment
from infra.constructs.functions import Functions as Functions
from infra.constructs.layers import Layers as Layers
from infra.constructs.observability import Observability as Observability
