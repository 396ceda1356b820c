from todo_list_api.infrastructure.persistence.mappers.task_record_mapper import TaskRecordMapper

__all__ = ["TaskRecordMapper"]
