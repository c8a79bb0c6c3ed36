"""Image encoding and generation package.

Scope:
    Provides data URL helpers, the response interpreter, the error taxonomy
    and the three image-editing task functions.

Non-goals:
    - No retries, caching or pipeline orchestration.
    - No persistence of generated images.
"""

from fitroom.image.encoding import (
    ImagePart,
    data_url_to_part,
    decode_data_url,
    encode_file_to_part,
    parse_data_url,
    read_file_as_data_url,
)
from fitroom.image.errors import (
    AbnormalTerminationError,
    BlockedRequestError,
    FitroomError,
    GenerationError,
    MalformedInputError,
    NoImageProducedError,
)
from fitroom.image.response import interpret_response
from fitroom.image.service import (
    generate_model_image,
    generate_pose_variation,
    generate_virtual_try_on_image,
)
