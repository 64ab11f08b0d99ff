class Error(Exception):
    pass


class DatabaseError(Error):
    pass
