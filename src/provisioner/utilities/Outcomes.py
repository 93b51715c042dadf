from provisioner.utilities.TableStatus import TableStatus


class Found:

    def __init__(self, description):
        self.description = description

    def is_active(self):
        return TableStatus.of(self.description) == TableStatus.ACTIVE

    def status(self):
        return TableStatus.of(self.description)

    def __repr__(self):
        return f"{type(self).__name__}({self.description.get('TableName')}, {self.description.get('TableStatus')})"


class NotFound:

    description = None

    def is_active(self):
        return False

    def status(self):
        return None

    def __repr__(self):
        return "NotFound()"


class Created(Found):
    pass


class AlreadyExists:

    def __repr__(self):
        return "AlreadyExists()"
