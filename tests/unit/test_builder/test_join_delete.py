"""Unit tests for LEFT JOIN and DELETE statements."""

from pqb import StatementBuilder


def test_left_join(builder: StatementBuilder) -> None:
    """Test left_join() quotes the table, alias and both sides of ON."""
    sql, _ = builder.from_("myschema.mytable").left_join("mycol", "mc", "myschema.mytable.id = mc.mt_id").build()

    assert sql == (
        'SELECT * FROM "myschema"."mytable" LEFT JOIN "mycol" AS "mc" ON "myschema"."mytable"."id" = "mc"."mt_id"'
    )


def test_left_join_without_spaces_in_condition(builder: StatementBuilder) -> None:
    """Test the ON condition is split on = regardless of spacing."""
    sql, _ = builder.from_("users").left_join("app.orders", "o", "users.id=o.user_id").build()

    assert sql == 'SELECT * FROM "users" LEFT JOIN "app"."orders" AS "o" ON "users"."id" = "o"."user_id"'


def test_left_join_extended(builder: StatementBuilder) -> None:
    """Test left_join_extended() appends its fragment verbatim after ON."""
    sql, _ = (
        builder.from_("users")
        .left_join_extended("orders", "o", "users.id = o.user_id", "AND o.deleted_at IS NULL")
        .build()
    )

    assert sql == (
        'SELECT * FROM "users" LEFT JOIN "orders" AS "o" ON "users"."id" = "o"."user_id" AND o.deleted_at IS NULL'
    )


def test_joins_render_in_call_order_before_where(builder: StatementBuilder) -> None:
    """Test joins keep their order and always precede WHERE."""
    sql, args = (
        builder.from_("users")
        .where("users.active", "=", "true")
        .left_join("orders", "o", "users.id = o.user_id")
        .left_join("payments", "p", "o.id = p.order_id")
        .build()
    )

    assert sql == (
        'SELECT * FROM "users" '
        'LEFT JOIN "orders" AS "o" ON "users"."id" = "o"."user_id" '
        'LEFT JOIN "payments" AS "p" ON "o"."id" = "p"."order_id" '
        'WHERE "users"."active" = $1'
    )
    assert args == ["true"]


def test_left_join_mysql() -> None:
    """Test joins follow the builder dialect."""
    sql, _ = StatementBuilder(dialect="mysql").from_("users").left_join("orders", "o", "users.id = o.user_id").build()

    assert sql == "SELECT * FROM `users` LEFT JOIN `orders` AS `o` ON `users`.`id` = `o`.`user_id`"


def test_delete_from(builder: StatementBuilder) -> None:
    """Test delete_from() renders a DELETE with bound conditions."""
    sql, args = builder.delete_from("myschema.mytable").where("mycol", "=", "1").build()

    assert sql == 'DELETE FROM "myschema"."mytable" WHERE "mycol" = $1'
    assert args == ["1"]


def test_delete_from_takes_precedence(builder: StatementBuilder) -> None:
    """Test DELETE FROM wins over FROM and drops the SELECT list."""
    builder.distinct = True
    sql, _ = builder.from_("other").select("id").delete_from("sessions").where("expired", "=", "true").build()

    assert sql == 'DELETE FROM "sessions" WHERE "expired" = $1'


def test_delete_without_where(builder: StatementBuilder) -> None:
    """Test a DELETE without conditions targets the whole table."""
    assert builder.delete_from("audit.log").build().sql == 'DELETE FROM "audit"."log"'


def test_blank_delete_table_is_unset(builder: StatementBuilder) -> None:
    """Test a blank DELETE table does not produce a DELETE statement."""
    assert builder.delete_from("   ").build() == ("", [])
    assert builder.from_("t").delete_from("").build().sql == 'SELECT * FROM "t"'
