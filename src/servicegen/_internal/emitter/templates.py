from textwrap import dedent

UNIT_TEMPLATE = dedent(
    """
    // <auto-generated />
    #nullable enable

    {% if namespace %}
    namespace {{ namespace }};

    {% endif %}
    {% if container_namespace %}
    using {{ container_namespace }};

    {% endif %}
    partial {{ type_keyword }} {{ class_name }}
    {
    {{ methods_block }}
    }
    """,
).lstrip()

METHOD_TEMPLATE = dedent(
    """
    {{ accessibility }} static partial {{ container_type }} {{ method_name }}(this {{ container_type }} {{ parameter_name }})
    {
    {% for statement in statements %}
        {{ statement }}
    {% endfor %}
        return {{ parameter_name }};
    }
    """,
).strip()

DIRECT_STATEMENT_TEMPLATE = "{{ parameter_name }}.Add{{ lifetime }}<{{ implementation }}>();"

MERGED_INTERFACE_STATEMENT_TEMPLATE = (
    "{{ parameter_name }}.Add{{ lifetime }}<{{ interface }}, {{ implementation }}>();"
)

FORWARD_STATEMENT_TEMPLATE = (
    "{{ parameter_name }}.Add{{ lifetime }}<{{ interface }}>"
    "(static p => p.GetRequiredService<{{ implementation }}>());"
)
