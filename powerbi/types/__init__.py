from .admin import *  # noqa: F403
from .common import *  # noqa: F403
from .dashboard import *  # noqa: F403
from .dataflow import *  # noqa: F403
from .dataset import *  # noqa: F403
from .embed_token import *  # noqa: F403
from .gateway import *  # noqa: F403
from .group import *  # noqa: F403
from .group_user import *  # noqa: F403
from .push_dataset import *  # noqa: F403
from .report import *  # noqa: F403
from .tile import *  # noqa: F403
