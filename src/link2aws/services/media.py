"""Media services. Resource types are known, none are linked yet."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import ServiceTemplates

LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "elastictranscoder": {  # Amazon Elastic Transcoder
        "job": None,
        "pipeline": None,
        "preset": None,
    },
    "mediaconnect": {  # AWS Elemental MediaConnect
        "entitlement": None,
        "flow": None,
        "output": None,
        "source": None,
    },
    "mediaconvert": {  # AWS Elemental MediaConvert
        "certificates": None,
        "jobTemplates": None,
        "jobs": None,
        "presets": None,
        "queues": None,
    },
    "medialive": {  # AWS Elemental MediaLive
        "channel": None,
        "input": None,
        "inputDevice": None,
        "inputSecurityGroup": None,
        "multiplex": None,
        "offering": None,
        "reservation": None,
    },
    "mediapackage": {  # AWS Elemental MediaPackage
        "channels": None,
        "origin_endpoints": None,
    },
    "mediapackage-vod": {  # AWS Elemental MediaPackage VOD
        "assets": None,
        "packaging-configurations": None,
        "packaging-groups": None,
    },
    "mediastore": {  # AWS Elemental MediaStore
        "container": None,
    },
    "mediatailor": {  # AWS Elemental MediaTailor
        "playbackConfiguration": None,
    },
}
