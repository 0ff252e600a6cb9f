from typing import Any, Self


class MockRequest:
    def __init__(self, method: str | None = 'GET', **attributes: Any):
        self.method = method
        for name, value in attributes.items():
            setattr(self, name, value)


class MockResponse:
    def __init__(self):
        self.status_code = 200
        self.data: Any = None
        self.write_count = 0

    def status(self, code: int) -> Self:
        self.status_code = code
        return self

    def json(self, body: Any) -> Self:
        return self.send(body)

    def send(self, body: Any) -> Self:
        self.data = body
        self.write_count += 1
        return self


# A middleware factory that records when its callback enters and exits
class SpyCallback:
    def __init__(self, tag: str, call_log: list[str]):
        self.tag = tag
        self.call_log = call_log

    async def __call__(self, req, res, next):
        self.call_log.append(f'{self.tag}_enter')
        result = await next()
        self.call_log.append(f'{self.tag}_exit')
        return result
