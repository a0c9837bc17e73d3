import io
import pathlib
from functools import wraps

from _oliword.rendering import RtfRenderer

RTF_PREAMBLE = r"""{\rtf1\pc {\info{\revtim\mo03\dy02\yr2021}{\creatim\mo03\dy02\yr2021}
{\nofchars31}}\deff0{\fonttbl{\f0\fmodern Times;}{\f1\fmodern Courier;}
{\f2\fmodern elite;}{\f3\fmodern prestige;}{\f4\fmodern lettergothic;}
{\f5\fmodern gothicPS;}{\f6\fmodern cubicPS;}
{\f7\fmodern lineprinter;}{\f8\fswiss Helvetica;}
{\f9\fmodern avantegarde;}{\f10\fmodern spartan;}{\f11\fmodern metro;}
{\f12\fmodern presentation;}{\f13\fmodern APL;}{\f14\fmodern OCRA;}
{\f15\fmodern OCRB;}{\f16\froman boldPS;}{\f17\froman emperorPS;}
{\f18\froman madaleine;}{\f19\froman zapf humanist;}
{\f20\froman classic;}{\f21\froman roman f;}{\f22\froman roman g;}
{\f23\froman roman h;}{\f24\froman timesroman;}{\f25\froman century;}
{\f26\froman palatino;}{\f27\froman souvenir;}{\f28\froman garamond;}
{\f29\froman caledonia;}{\f30\froman bodini;}{\f31\froman university;}
{\f32\fscript script;}{\f33\fscript scriptPS;}{\f34\fscript script c;}
{\f35\fscript script d;}{\f36\fscript commercial script;}
{\f37\fscript park avenue;}{\f38\fscript coronet;}
{\f39\fscript script h;}{\f40\fscript greek;}{\f41\froman kana;}
{\f42\froman hebrew;}{\f43\froman roman s;}{\f44\froman russian;}
{\f45\froman roman u;}{\f46\froman roman v;}{\f47\froman roman w;}
{\f48\fdecor narrator;}{\f49\fdecor emphasis;}
{\f50\fdecor zapf chancery;}{\f51\fdecor decor d;}
{\f52\fdecor old english;}{\f53\fdecor decor f;}{\f54\fdecor decor g;}
{\f55\fdecor cooper black;}{\f56\ftech Symbol;}{\f57\ftech linedraw;}
{\f58\ftech math7;}{\f59\ftech math8;}{\f60\ftech bar3of9;}
{\f61\ftech EAN;}{\f62\ftech pcline;}{\f63\ftech tech h;}}{\colortbl
\red0\green0\blue0;\red255\green0\blue0;
\red0\green255\blue0;\red0\green0\blue255;
\red0\green255\blue255;\red255\green0\blue255;
\red255\green255\blue0;\red255\green255\blue255;}
\paperw11907\paperh16840\ftnbj\ftnrestart\widowctrl \sectd 
\linex576\endnhere """

RTF_END = "}"


def takes_stream(i, mode):
    """
    Decorator for functions taking a stream as argument i, which makes
    them also accept a path (string or pathlib.Path) to be opened with
    the given mode.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                encoding = None if "b" in mode else "utf-8"
                with open(args[i], mode, encoding=encoding) as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


@takes_stream(0, "w")
def write(file_stream, tokens):
    """
    Writes the RTF document for the given tokens.

    :param file_stream: A file-like object, (string to path, pathlib.Path
        or opened text stream).
    :param tokens: Iterable of tokens, see _oliword.tokenizer.
    """
    file_stream.write(RTF_PREAMBLE)
    file_stream.write("\n")
    for group in RtfRenderer(tokens):
        file_stream.write(group)
        file_stream.write("\n")
    file_stream.write(RTF_END)
    file_stream.write("\n")
    file_stream.flush()


def render(tokens):
    """
    :returns: The complete RTF document for the given tokens as a string.
    """
    buffer = io.StringIO()
    write(buffer, tokens)
    return buffer.getvalue()
