from flask import render_template_string

PAGE = """<!doctype html>
<html>
  <head><title>User Form</title></head>
  <body>
    <div>
      <h1>User Form</h1>
      <form method="post" action="/">
        <input name="name" value="{{ current_input }}">
        <button type="submit">Submit</button>
      </form>
      <ul>
        {%- for name in names %}
        <li>{{ name }}</li>
        {%- endfor %}
      </ul>
    </div>
  </body>
</html>
"""


def display_name(item):
    # null, booleans and a missing name render as an empty line
    name = item.get("name")
    if name is None or isinstance(name, bool):
        return ""
    return name


class UserFormView:
    """
    State behind the user form: the text in the input and the records last fetched.

    ``submit`` is create, clear, re-list, strictly in that order. The list is
    never patched locally, it is always whatever the last listing returned.
    """

    def __init__(self, client):
        self.client = client
        self.current_input = ""
        self.records = []

    def mount(self):
        self.records = self.client.list_users()

    def submit(self):
        self.client.create_user(self.current_input)
        self.current_input = ""
        self.mount()

    def render(self) -> str:
        # lines are positional; no identity is kept between fetches
        return render_template_string(
            PAGE,
            current_input=self.current_input,
            names=[display_name(item) for item in self.records],
        )
