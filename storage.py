"""
Storage Module - Persists contact submissions to MongoDB

The store handle is built once at startup by create_app() and shared by
every request. Only inserts are exposed.
"""

from bson.errors import BSONError
from pymongo import MongoClient
from pymongo.errors import PyMongoError


class StorageError(RuntimeError):
    """Raised when a submission could not be stored, whatever the cause"""


class SubmissionStore:
    """Write-only adapter around a single MongoDB collection"""

    def __init__(self, collection):
        self.collection = collection

    def save(self, submission):
        """
        Insert one submission as a new document

        Args:
            submission (Submission): Validated submission

        Returns:
            str: Store-assigned document id

        Raises:
            StorageError: On connection failure, write rejection or an un-encodable document
        """
        try:
            result = self.collection.insert_one(submission.to_document())
        except (PyMongoError, BSONError, UnicodeEncodeError) as e:
            raise StorageError(str(e)) from e
        return str(result.inserted_id)

    def ping(self):
        """Check that the database answers a round trip"""
        try:
            self.collection.database.command('ping')
            return True
        except PyMongoError:
            return False


def connect_store(app_config):
    """
    Build the process-wide store from application config

    MongoClient connects lazily and pools connections, so this is cheap at
    startup and safe to share between request threads.
    """
    client = MongoClient(
        app_config['MONGODB_URI'],
        serverSelectionTimeoutMS=app_config.get('MONGODB_TIMEOUT_MS', 5000),
        tz_aware=True,
    )
    db_name = app_config.get('MONGODB_DB_NAME')
    if db_name:
        database = client[db_name]
    else:
        database = client.get_default_database('portfolio')
    return SubmissionStore(database[app_config.get('MONGODB_COLLECTION', 'contacts')])


__all__ = ['SubmissionStore', 'StorageError', 'connect_store']
