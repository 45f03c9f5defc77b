import click


class BoardSize(click.ParamType):
    name = "board_size"

    def convert(
        self,
        value: str | tuple[int, int],
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[int, int]:
        if isinstance(value, tuple):
            return value

        try:
            height, width = map(int, value.split("x"))
        except (TypeError, ValueError):
            self.fail("Expected two integers separated by 'x' (e.g. '30x14').", param, ctx)

        if height <= 0 or width <= 0:
            self.fail("Board height and width need to be positive.", param, ctx)

        return height, width
