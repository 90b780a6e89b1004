import traceback

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError

from ..schemas import format_validation_error, serialize_document


def read_json_body():
    """Return the JSON object body, or None when the body is not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def duplicate_message(store):
    fields = ' and '.join(store.unique_fields) or 'values'
    return f"A {store.label.lower()} with this {fields} already exists"


def create_resource_blueprint(name, store, create_model, update_model, logger,
                              search_fields=(), before_delete=None):
    """Blueprint with create/list/search/get/update/delete for one collection.

    ``before_delete(record)`` may return an error message to block a delete
    with a 400.
    """
    bp = Blueprint(name, __name__, url_prefix=f'/api/{name}')
    label = store.label
    plural = name

    @bp.route('', methods=['POST'])
    def create_record():
        data = read_json_body()
        if data is None:
            return jsonify({'message': 'Request body must be a JSON object'}), 400

        try:
            payload = create_model.model_validate(data)
            record = store.create(payload.to_document())
            logger.info(f"✅ {label} created", extra={'context': {'id': str(record['_id'])}})
            return jsonify(serialize_document(record)), 201

        except ValidationError as e:
            message = format_validation_error(e)
            logger.error(f"Error creating {label.lower()}: {message}")
            return jsonify({'message': message}), 400
        except DuplicateKeyError as e:
            logger.error(f"Error creating {label.lower()}: {e}")
            return jsonify({'message': duplicate_message(store)}), 400
        except Exception as e:
            logger.error(f"Error creating {label.lower()}: {e}")
            logger.error(traceback.format_exc())
            return jsonify({'message': f'Failed to create {label.lower()}'}), 500

    @bp.route('', methods=['GET'])
    def list_records():
        try:
            records = store.list()
            logger.info(f"Retrieved {len(records)} {plural}")
            return jsonify(serialize_document(records))

        except Exception as e:
            logger.error(f"Error fetching {plural}: {e}")
            logger.error(traceback.format_exc())
            return jsonify({'message': f'Failed to load {plural}'}), 500

    if search_fields:
        @bp.route('/search', methods=['GET'])
        def search_records():
            try:
                term = request.args.get('q', '').strip()
                records = store.search(term, search_fields)
                logger.info("Search completed", extra={'context': {'resource': plural, 'count': len(records)}})
                return jsonify(serialize_document(records))

            except Exception as e:
                logger.error(f"Search error: {e}")
                logger.error(traceback.format_exc())
                return jsonify({'message': 'Search failed'}), 500

    @bp.route('/<record_id>', methods=['GET'])
    def get_record(record_id):
        try:
            record = store.get(record_id)
            if not record:
                return jsonify({'message': f'{label} not found'}), 404
            return jsonify(serialize_document(record))

        except Exception as e:
            logger.error(f"Error fetching {label.lower()}: {e}")
            logger.error(traceback.format_exc())
            return jsonify({'message': f'Failed to load {label.lower()}'}), 500

    @bp.route('/<record_id>', methods=['PUT'])
    def update_record(record_id):
        data = read_json_body()
        if data is None:
            return jsonify({'message': 'Request body must be a JSON object'}), 400

        try:
            payload = update_model.model_validate(data)
            record = store.update(record_id, payload.to_document())
            if not record:
                return jsonify({'message': f'{label} not found'}), 404

            logger.info(f"✅ {label} updated", extra={'context': {'id': record_id}})
            return jsonify(serialize_document(record))

        except ValidationError as e:
            message = format_validation_error(e)
            logger.error(f"Error updating {label.lower()}: {message}")
            return jsonify({'message': message}), 400
        except DuplicateKeyError as e:
            logger.error(f"Error updating {label.lower()}: {e}")
            return jsonify({'message': duplicate_message(store)}), 400
        except Exception as e:
            logger.error(f"Error updating {label.lower()}: {e}")
            logger.error(traceback.format_exc())
            return jsonify({'message': f'Failed to update {label.lower()}'}), 500

    @bp.route('/<record_id>', methods=['DELETE'])
    def delete_record(record_id):
        try:
            if before_delete is not None:
                record = store.get(record_id)
                if not record:
                    return jsonify({'message': f'{label} not found'}), 404
                blocked = before_delete(record)
                if blocked:
                    logger.warning(f"{label} delete blocked: {blocked}", extra={'context': {'id': record_id}})
                    return jsonify({'message': blocked}), 400

            record = store.delete(record_id)
            if not record:
                return jsonify({'message': f'{label} not found'}), 404

            logger.info(f"✅ {label} deleted", extra={'context': {'id': record_id}})
            return jsonify({'message': f'{label} deleted successfully'})

        except Exception as e:
            logger.error(f"Error deleting {label.lower()}: {e}")
            logger.error(traceback.format_exc())
            return jsonify({'message': f'Failed to delete {label.lower()}'}), 500

    return bp
