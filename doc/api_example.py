import io
import langneg

supported = ['en', 'en-GB', 'de', 'de-CH-1996', 'fr-CA']

requests = [
    'de-CH, de;q=0.9, en;q=0.5',
    'fr-FR, fr;q=0.8',
    'en-US;q=0.8, *;q=0.1',
]

negotiations = [langneg.negotiate('lookup', accept_language, supported, 'en')
                for accept_language in requests]

for negotiation in negotiations:
    print('%s -> %s' % (negotiation.language_range, negotiation.result))

if not all(negotiation.matched for negotiation in negotiations):
    with io.open('report.html', 'wb') as f:
        langneg.html_report(negotiations, f)
    print('some requests fell back to the default; report written to file')
