"""Publishers Service — organisations that publish OSS into the register."""

from oss_register.services.operation import wrap

SERVICE_NAME = "PublishersService"

list_publishers = wrap(SERVICE_NAME, "listPublishers")
