"""
Basic usage example for workflowquery.
"""

from datetime import datetime, timedelta, timezone

from workflowquery import (
    ClauseBuilder,
    ExecutionStatus,
    LogicalOperator,
    SearchAttribute,
    ValidationError,
)


def main():
    print("=" * 60)
    print("workflowquery Basic Usage Example")
    print("=" * 60)

    # 1. Simple comparison
    print("\n1. Comparison clauses...")
    q = ClauseBuilder()
    q.start_clause(SearchAttribute.WORKFLOW_TYPE, "=", "TestMe")
    q.and_(SearchAttribute.EXECUTION_STATUS, "=", ExecutionStatus.RUNNING)
    print(f"   {q.encode()}")

    # 2. Time window
    print("\n2. Time window...")
    end = datetime.now(timezone.utc)
    q.between(
        SearchAttribute.START_TIME,
        end - timedelta(minutes=5),
        end,
        LogicalOperator.AND,
    )
    print(f"   {q.encode()}")

    # 3. Replacing a clause keeps its position
    print("\n3. Replacing a clause...")
    q.or_(SearchAttribute.EXECUTION_STATUS, "=", ExecutionStatus.FAILED)
    print(f"   {q.encode()}")

    # 4. Membership and prefix
    print("\n4. IN and STARTS_WITH...")
    failed = ClauseBuilder()
    failed.in_(
        SearchAttribute.EXECUTION_STATUS,
        [ExecutionStatus.FAILED, ExecutionStatus.TIMED_OUT],
    )
    failed.starts_with("order-", LogicalOperator.AND)
    print(f"   {failed}")

    # 5. Strict mode
    print("\n5. Strict mode...")
    strict = ClauseBuilder(strict=True)
    strict.start_clause(SearchAttribute.TASK_QUEUE, "=", "default")
    try:
        strict.clause(SearchAttribute.RUN_ID, "=", "abc", "")
    except ValidationError as e:
        print(f"   Rejected: {e}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
