import uuid
from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, ConditionBase

from blog_api.models.post import utc_now


class PostRepository:
    def __init__(self, table):
        self._logger = Logger(utc=True)
        self._table = table

    def create_post(self, data: dict[str, Any]) -> dict[str, Any]:
        item = {**data, "id": str(uuid.uuid4())}
        item.setdefault("created", utc_now())
        self._table.put_item(Item=item, ConditionExpression=Attr("id").not_exists())
        return item

    def get_all_posts(self) -> list[dict[str, Any]]:
        items = []
        response = self._table.scan()
        items.extend(response["Items"])
        while "LastEvaluatedKey" in response:
            response = self._table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
            items.extend(response["Items"])
        return items

    def get_post_by_uuid(self, post_uuid: str) -> dict[str, Any] | None:
        response = self._table.get_item(Key={"id": post_uuid})
        return response.get("Item")

    def update_post(
        self, post_uuid: str, data: dict[str, Any], condition_expression: ConditionBase
    ):
        attr_names = {f"#{k}": k for k in data}
        attr_values = {f":{k}": v for k, v in data.items()}
        update_expr = ", ".join(f"#{k}=:{k}" for k in data)
        self._table.update_item(
            Key={"id": post_uuid},
            ConditionExpression=condition_expression,
            UpdateExpression=f"SET {update_expr}",
            ExpressionAttributeNames=attr_names,
            ExpressionAttributeValues=attr_values,
        )

    def delete_post(self, post_uuid: str):
        self._table.delete_item(Key={"id": post_uuid})
        self._logger.debug(f"Delete issued for {post_uuid=}")
