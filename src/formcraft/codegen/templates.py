"""Document templates wrapping per-field code into standalone source files."""

from __future__ import annotations

from string import Template

EMPTY_MARKUP = "// No fields added yet"

MARKUP_TEMPLATE = Template(
    """\
"use client";

import { zodResolver } from "@hookform/resolvers/zod";
import { useForm } from "react-hook-form";
import { z } from "zod";
import { Button } from "@/components/ui/button";
import {
  Form,
  FormControl,
  FormDescription,
  FormField,
  FormItem,
  FormLabel,
  FormMessage,
} from "@/components/ui/form";
$imports
import { formSchema } from "$schema_module";

export function $component_name() {
  const form = useForm<z.infer<typeof formSchema>>({
    resolver: zodResolver(formSchema),
    defaultValues: $default_values,
  });

  function onSubmit(values: z.infer<typeof formSchema>) {
    // Do something with the form values
    console.log(values);
  }

  return (
    <Form {...form}>
      <form onSubmit={form.handleSubmit(onSubmit)} className="space-y-8">
$fields

        <Button type="submit">Submit</Button>
      </form>
    </Form>
  );
}
""",
)

SCHEMA_TEMPLATE = Template(
    """\
import * as z from "zod";

export const formSchema = z.object({$entries});

export type FormValues = z.infer<typeof formSchema>;
""",
)


def render_default_values(defaults: list[tuple[str, str]]) -> str:
    """Render the `defaultValues` object literal.

    Args:
        defaults (list[tuple[str, str]]): `(field name, TS literal)` pairs.

    Returns:
        str: Object literal indented for the `useForm` call.
    """
    if not defaults:
        return "{}"
    lines = [f"      {name}: {literal}," for name, literal in defaults]
    return "\n".join(["{", *lines, "    }"])


def render_markup_document(
    *,
    imports: list[str],
    fields: str,
    default_values: str,
    component_name: str,
    schema_module: str,
) -> str:
    """Splice field fragments into the form component template."""
    return MARKUP_TEMPLATE.substitute(
        imports="\n".join(imports),
        fields=fields,
        default_values=default_values,
        component_name=component_name,
        schema_module=schema_module,
    )


def render_schema_document(entries: list[str]) -> str:
    """Splice schema entries into the `z.object` template.

    Multi-line entries keep their relative indentation.
    """
    if not entries:
        return SCHEMA_TEMPLATE.substitute(entries="")
    body = "".join("\n" + "\n".join(f"  {line}" for line in entry.splitlines()) + "," for entry in entries)
    return SCHEMA_TEMPLATE.substitute(entries=body + "\n")
