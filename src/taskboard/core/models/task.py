"""Task Domain Model

Task 是系统唯一的实体。JSON 输出使用 camelCase 时间戳字段
（createdAt / updatedAt），Python 侧保持 snake_case。
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .enums import TaskStatus


class Task(BaseModel):
    """Task 数据模型

    不变量：
    - id 在所有存活任务中唯一，创建后不可变
    - status 始终是 TaskStatus 枚举值之一
    - updated_at >= created_at
    """

    # 同时接受字段名与 camelCase 别名，响应序列化按别名输出
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    description: str = Field(description="任务描述")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="当前状态")
    created_at: datetime = Field(alias="createdAt", description="创建时间")
    updated_at: datetime = Field(alias="updatedAt", description="更新时间")


class TaskPage(BaseModel):
    """分页查询结果

    total 是过滤后、分页前的条数，调用方据此计算总页数。
    """

    total: int = Field(description="过滤后的总条数")
    page: int = Field(description="当前页码（从 1 开始）")
    limit: int = Field(description="每页条数")
    data: list[Task] = Field(default_factory=list, description="当前页任务")
