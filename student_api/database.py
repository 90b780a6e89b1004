import re
from datetime import datetime, timezone

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, MongoClient, ReturnDocument
from pymongo.errors import PyMongoError

DEFAULT_DATABASE = 'student-management-app'


def utcnow():
    return datetime.now(timezone.utc)


def to_object_id(record_id):
    """Return the ObjectId for a path id, or None when it cannot be one."""
    if isinstance(record_id, ObjectId):
        return record_id
    if not ObjectId.is_valid(record_id):
        return None
    return ObjectId(record_id)


class ResourceStore:
    """All persistence calls for one collection."""

    def __init__(self, collection, sort, unique_fields=(), label='Record', clock=utcnow,
                 before_write=None):
        self.collection = collection
        self.sort = sort
        self.unique_fields = tuple(unique_fields)
        self.label = label
        self.clock = clock
        self.before_write = before_write

    def create(self, fields):
        if self.before_write is not None:
            self.before_write()
        now = self.clock()
        document = dict(fields)
        document['createdAt'] = now
        document['updatedAt'] = now
        result = self.collection.insert_one(document)
        return self.collection.find_one({'_id': result.inserted_id})

    def list(self):
        return list(self.collection.find().sort(self.sort))

    def get(self, record_id):
        oid = to_object_id(record_id)
        if oid is None:
            return None
        return self.collection.find_one({'_id': oid})

    def update(self, record_id, fields):
        oid = to_object_id(record_id)
        if oid is None:
            return None
        if self.before_write is not None:
            self.before_write()
        changes = dict(fields)
        changes['updatedAt'] = self.clock()
        return self.collection.find_one_and_update(
            {'_id': oid},
            {'$set': changes},
            return_document=ReturnDocument.AFTER
        )

    def delete(self, record_id):
        oid = to_object_id(record_id)
        if oid is None:
            return None
        return self.collection.find_one_and_delete({'_id': oid})

    def search(self, term, fields):
        pattern = re.escape(term or '')
        query = {'$or': [{field: {'$regex': pattern, '$options': 'i'}} for field in fields]}
        return list(self.collection.find(query).sort(self.sort))

    def count(self, query=None):
        return self.collection.count_documents(query or {})

    def group_counts(self, field):
        return list(self.collection.aggregate([
            {'$group': {'_id': f'${field}', 'count': {'$sum': 1}}},
            {'$sort': {'_id': ASCENDING}}
        ]))


class Database:
    """MongoDB client plus one store per resource collection."""

    def __init__(self, client, name=DEFAULT_DATABASE):
        self.client = client
        self.db = client[name]
        self.name = name
        self.indexes_ready = False

        self.students = ResourceStore(
            self.db.students, [('createdAt', DESCENDING)],
            unique_fields=('email',), label='Student', before_write=self.require_indexes
        )
        self.courses = ResourceStore(
            self.db.courses, [('name', ASCENDING)],
            unique_fields=('name',), label='Course', before_write=self.require_indexes
        )
        self.teachers = ResourceStore(
            self.db.teachers, [('name', ASCENDING)],
            unique_fields=('email',), label='Teacher', before_write=self.require_indexes
        )

    @classmethod
    def from_config(cls, config):
        timeout = config.get('MONGO_TIMEOUT_MS', 5000)
        client = MongoClient(
            config['MONGODB_URI'],
            serverSelectionTimeoutMS=timeout,
            connectTimeoutMS=timeout,
            socketTimeoutMS=timeout,
            maxPoolSize=50,
            connect=False
        )
        name = config.get('DATABASE_NAME') or client.get_default_database(DEFAULT_DATABASE).name
        return cls(client, name)

    def create_indexes(self):
        self.db.students.create_index([('email', ASCENDING)], unique=True)
        self.db.students.create_index([('createdAt', DESCENDING)])
        self.db.students.create_index([('course', ASCENDING)])
        self.db.students.create_index([('status', ASCENDING)])

        self.db.courses.create_index([('name', ASCENDING)], unique=True)
        self.db.courses.create_index([('status', ASCENDING)])

        self.db.teachers.create_index([('email', ASCENDING)], unique=True)
        self.db.teachers.create_index([('name', ASCENDING)])

        self.indexes_ready = True

    def ensure_indexes(self, logger):
        """Create indexes at startup; a failure is logged and retried on the next write."""
        try:
            self.create_indexes()
            logger.info(f"✅ Indexes ready on database: {self.name}")
            return True
        except PyMongoError as e:
            logger.error(f"❌ Failed to create MongoDB indexes: {e}")
            return False

    def require_indexes(self):
        """Writes rely on the unique indexes; raises PyMongoError while they cannot be built."""
        if not self.indexes_ready:
            self.create_indexes()

    def is_connected(self):
        try:
            self.client.admin.command('ping')
            return True
        except PyMongoError:
            return False

    def close(self):
        self.client.close()
