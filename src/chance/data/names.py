"""Person name corpora.

Given names are keyed by gender then nationality, surnames by nationality.
The ``en`` lists are drawn from common US census names and the ``it`` lists
from common Italian names; both are deliberately modest in size.
"""

from __future__ import annotations

from typing import Dict, List

__all__ = ["FIRST_NAMES", "LAST_NAMES", "NATIONALITIES"]

_MALE_EN = """
James John Robert Michael William David Richard Joseph Charles Thomas
Christopher Daniel Matthew George Donald Anthony Paul Mark Edward Steven
Kenneth Andrew Brian Joshua Kevin Ronald Timothy Jason Jeffrey Frank Gary
Ryan Nicholas Eric Stephen Jacob Larry Jonathan Scott Raymond Justin Brandon
Gregory Samuel Benjamin Patrick Jack Henry Walter Dennis Jerry Alexander
Peter Tyler Douglas Harold Aaron Jose Adam Arthur Zachary Carl Nathan Albert
Kyle Lawrence Joe Willie Gerald Roger Keith Jeremy Terry Harry Ralph Sean
Jesse Roy Louis Billy Austin Bruce Eugene Christian Bryan Wayne Russell
Howard Fred Ethan Jordan Philip Alan Juan Randy Vincent Bobby Dylan Johnny
Phillip Victor Clarence Ernest Martin Craig Stanley Shawn Travis Bradley
""".split()

_FEMALE_EN = """
Mary Patricia Jennifer Elizabeth Linda Barbara Susan Margaret Jessica Sarah
Dorothy Karen Nancy Betty Lisa Sandra Helen Ashley Donna Kimberly Carol
Michelle Emily Amanda Melissa Deborah Laura Stephanie Rebecca Sharon Cynthia
Kathleen Ruth Anna Shirley Amy Angela Virginia Brenda Pamela Catherine
Katherine Nicole Christine Janet Debra Carolyn Samantha Rachel Heather Maria
Diane Frances Joyce Julie Martha Joan Evelyn Kelly Christina Emma Lauren
Alice Judith Marie Doris Ann Jean Victoria Cheryl Megan Kathryn Andrea
Jacqueline Gloria Teresa Janice Sara Rose Julia Hannah Theresa Judy Mildred
Grace Beverly Denise Marilyn Amber Danielle Brittany Diana Jane Lori Olivia
Tiffany Kathy Tammy Crystal Madison
""".split()

_MALE_IT = """
Adolfo Alberto Aldo Alessandro Alessio Alfredo Alvaro Andrea Angelo Angiolo
Antonino Antonio Attilio Benito Bernardo Bruno Carlo Cesare Christian Claudio
Corrado Cosimo Cristian Cristiano Daniele Dario David Davide Diego Dino
Domenico Duccio Edoardo Elia Elio Emanuele Emiliano Emilio Enrico Enzo
Ettore Fabio Fabrizio Federico Ferdinando Fernando Filippo Francesco Franco
Gabriele Giacomo Giampaolo Giampiero Giancarlo Gianfranco Gianluca Gianmarco
Gianni Gino Giorgio Giovanni Giuliano Giulio Giuseppe Graziano Gregorio
Guido Iacopo Jacopo Lapo Leonardo Lorenzo Luca Luciano Luigi Manuel Marcello
Marco Marino Mario Massimiliano Massimo Matteo Mattia Maurizio Mauro Michele
Mirko Mohamed Nello Neri Niccolo Nicola Osvaldo Otello Paolo Pier Piero
Pietro Raffaele Remo Renato Renzo Riccardo Roberto Rolando Romano Salvatore
Samuele Sandro Sergio Silvano Simone Stefano Thomas Tommaso Ubaldo Ugo
Umberto Valerio Valter Vasco Vincenzo Vittorio
""".split()

_FEMALE_IT = """
Ada Adriana Alessandra Alessia Alice Angela Anna Annalisa
Annita Annunziata Antonella Arianna Asia Assunta Aurora Barbara Beatrice
Benedetta Bianca Bruna Camilla Carla Carlotta Carmela Carolina Caterina
Catia Cecilia Chiara Cinzia Clara Claudia Costanza Cristina Daniela Debora
Diletta Dina Donatella Elena Eleonora Elisa Elisabetta Emanuela Emma Eva
Federica Fernanda Fiorella Fiorenza Flavia Franca Francesca Gabriella Gaia
Gemma Giada Gianna Gina Ginevra Giorgia Giovanna Giulia Giuliana Giuseppa
Gloria Grazia Guya Ilaria Ilenia Irene Irma Isabella Isotta Ivana Lara
Laura Letizia Lia Licia Lidia Liliana Lina Linda Lisa Livia Loretta Luana
Lucia Luciana Lucrezia Luisa Manuela Mara Marcella Margherita Maria Marina
Marisa Marta Martina Matilde Maura Melania Melissa Michela Milena Mirella
Monica Natalina Nella Nicoletta Noemi Olga Paola Patrizia Piera Pierina
Raffaella Rebecca Renata Rina Rita Roberta Rosa Rosanna Rossana Rossella
Sabrina Sandra Sara Serena Silvana Silvia Simona Simonetta Sofia Sonia
Stefania Susanna Teresa Tina Tiziana Tosca Valentina Valeria Vanda Vanessa
Vanna Vera Veronica Vilma Viola Virginia Vittoria
""".split()

FIRST_NAMES: Dict[str, Dict[str, List[str]]] = {
    "male": {"en": _MALE_EN, "it": _MALE_IT},
    "female": {"en": _FEMALE_EN, "it": _FEMALE_IT},
}

_LAST_EN = """
Smith Johnson Williams Jones Brown Davis Miller Wilson Moore Taylor Anderson
Thomas Jackson White Harris Martin Thompson Garcia Martinez Robinson Clark
Rodriguez Lewis Lee Walker Hall Allen Young Hernandez King Wright Lopez Hill
Scott Green Adams Baker Gonzalez Nelson Carter Mitchell Perez Roberts Turner
Phillips Campbell Parker Evans Edwards Collins Stewart Sanchez Morris Rogers
Reed Cook Morgan Bell Murphy Bailey Rivera Cooper Richardson Cox Howard Ward
Torres Peterson Gray Ramirez James Watson Brooks Kelly Sanders Price Bennett
Wood Barnes Ross Henderson Coleman Jenkins Perry Powell Long Patterson Hughes
Flores Washington Butler Simmons Foster Gonzales Bryant Alexander Russell
Griffin Diaz Hayes Myers Ford Hamilton Graham Sullivan Wallace Woods Cole
West Jordan Owens Reynolds Fisher Ellis Harrison Gibson Mcdonald Cruz
Marshall Ortiz Gomez Murray Freeman Wells Webb Simpson Stevens Tucker Porter
Hunter Hicks Crawford Henry Boyd Mason Morales Kennedy Warren Dixon Ramos
Reyes Burns Gordon Shaw Holmes Rice Robertson Hunt Black Daniels Palmer
Mills Nichols Grant Knight Ferguson Rose Stone Hawkins Dunn Perkins Hudson
Spencer Gardner Stephens Payne Pierce Berry Matthews Arnold Wagner Willis
Ray Watkins Olson Carroll Duncan Snyder Hart Cunningham Bradley Lane Andrews
Ruiz Harper Fox Riley Armstrong Carpenter Weaver Greene Lawrence Elliott
Chavez Sims Austin Peters Kelley Franklin Lawson
""".split()

_LAST_IT = """
Acciai Aglietti Agostini Agresti Ahmed Aiazzi Albanese Alberti Alessandrini
Alessi Alfani Alinari Alterini Amato Ammannati Ancillotti Andrei Andreini
Andreoni Angeli Anichini Antonelli Antonini Arena Ariani Arnetoli Arrighi
Baccani Baccetti Bacci Bacherini Badii Baggiani Baglioni Bagni Bagnoli
Baldassini Baldi Baldini Ballerini Balli Ballini Balloni Bambi Banchi
Bandinelli Bandini Bani Barbetti Barbieri Barchielli Bardazzi Bardelli Bardi
Barducci Bargellini Bargiacchi Barni Baroncelli Baroncini Barone Baroni
Baronti Bartalesi Bartoletti Bartoli Bartolini Bartoloni Bartolozzi Basagni
Basile Bassi Batacchi Battaglia Battaglini Bausi Becagli Becattini Becchi
Becucci Bellandi Bellesi Belli Bellini Bellucci Bencini Benedetti Benelli
Beni Benini Bensi Benucci Benvenuti Berlincioni Bernacchioni Bernardi
Bernardini Berni Bernini Bertelli Berti Bertini Bertoli Bertolini Bertoncini
Bettarini Bettini Biagi Biagini Biagioni Biagiotti Biancalani Bianchi
Bianchini Bianco Biffoli Bigazzi Bigi Biliotti Billi Binazzi Bindi Bini
Biondi Bizzarri Bocci Bogani Bolognesi Bonaiuti Bonanni Bonciani Boncinelli
Bondi Bonechi Bongini Boni Bonini Borchi Borghi Borgioli Borri Borselli
Boschi Bottai Bracci Braccini Brandi Braschi Bravi Brazzini Breschi
Brilli Brizzi Brogelli Brogi Brogioni Brunelli Brunetti Bruni Bruno Brunori
Bruschi Bucci Bucciarelli Buccioni Bucelli Bulli Buonamici Burgassi
Burgalassi Burchietti Caciolli Caiani Calabrese Calamai Calamandrei Caldini
Calo Calonaci Calosi Calvelli Cambi Camiciottoli Cammelli Cammilli Campolmi
Cantini Capanni Capecchi Caponi Cappelletti Cappelli Cappellini Cappugi
Capretti Caputo Carbone Carboni Cardini Carlesi Carletti Carli Caroti
Carotti Carrai Carraresi Carta Caruso Casalini Casati Caselli Casini
Castagnoli Castellani Castelli Castellucci Catalano Catarzi Catelani
Cavaciocchi Cavallaro Cavallini Cavicchi Cavini Ceccarelli Ceccatelli
Ceccherelli Ceccherini Cecchi Cecchini Cecconi Cei Cellai Celli Cellini
Cencetti Ceni Cenni Cerbai Cesari Ceseri Checcacci Checchi Checcucci
Cheli Chellini Chen Cheng Cherici Cherubini Chiaramonti Chiarantini Chiarelli
Chiari Chiarini Chiarugi Chiavacci Chiesi Chimenti Chini Chirici Chiti
Ciabatti Ciampi Cianchi Cianfanelli Cianferoni Ciani Ciapetti Ciappi Ciardi
Ciatti Cicali Ciccone Cinelli Cini Ciobanu Ciolli Cioni Cipriani Cirillo
Cirri Ciucchi Ciuffi Ciulli Ciullini Clemente Cocchi Coli Collini
Colombo Colzi Comparini Conforti Consigli Conte Conti Contini Coppini
Coppola Corsi Corsini Corti Cortini Cosi Costa Costantini Costantino Cozzi
Cresci Crescioli Cresti Crini Curradi DAgostino DAlessandro DAmico DAngelo
Daddi Dainelli Dallai Danti Davitti DeAngelis DeLuca DeMarco DeRosa DeSantis
DeSimone DeVita Degl'Innocenti Dei DelLungo DelRe DiMarco
DiStefano Dini Diop Dobre Dolfi Donati Dondoli Dong Donnini Ducci Dumitru
Ermini Esposito Evangelisti Fabbri Fabbrini Fabbrizzi Fabbroni Fabbrucci
Fabiani Facchini Faggi Fagioli Failli Faini Falciani Falcini Falcone
Fallani Falorni Falsini Falugiani Fancelli Fanelli Fanetti Fanfani Fani
Fantappie Fantechi Fanti Fantini Fantoni Farina Fattori Favilli Fedi
Fei Ferrante Ferrara Ferrari Ferraro Ferretti Ferri Ferrini Ferroni Fiaschi
Fibbi Fiesoli Filippi Filippini Fini Fioravanti Fiore Fiorentini Fiorini
Fissi Focardi Foggi Fontana Fontanelli Fontani Forconi Formigli Forte Forti
Fortini Fossati Fossi Francalanci Franceschi Franceschini Franchi Franchini
Franci Francini Francioni Franco Frassineti Frati Fratini Frilli Frizzi
Frosali Frosini Frullini Fusco Fusi Gabbrielli Gabellini Gagliardi Galanti
Galardi Galeotti Galletti Galli Gallo Gallori Gambacciani Gargani Garofalo
Garzella Gashi Gasperini Gatti Gelli Gensini Gentile Gentili Geri Gerini
Gheri Ghini Giachetti Giachi Giacomelli Gianassi Giani Giannelli Giannetti
Gianni Giannini Giannoni Giannotti Giannozzi Gigli Giglioli Giorgetti Giorgi
Giovacchini Giovannelli Giovannetti Giovannini Giovannoni Giuliani Giunti
Giuntini Giusti Gonnelli Goretti Gori Gradi Gramigni Grassi Grasso Graziani
Grazzini Greco Grifoni Grillo Grimaldi Grossi Gualtieri Guarducci Guarino
Guarnieri Guasti Guerra Guerri Guerrini Guidi Guidotti Hu Huang Innocenti
Iacopini Iannelli Iorio Italiano Lapi Lari Lazzeri Lazzerini Lelli Lenzi
Leone Leoni Lepri Li Lin Liu Lo Lombardi Lombardo Longo Lorenzi Lorenzini
Lotti Lucchesi Lucchesini Luchi Lumachi Lunardi Lupi Lusini Lussi Luzzi
Macchi Macri Maggi Maggini Magnani Magni Magnolfi Maiorano Malquori Mancini
Mancuso Manetti Manfredi Mangani Mannelli Manni Mannini Mannucci Manuelli
Manzi Marcelli Marchetti Marchi Marchini Marchionni Marconi Marcucci
Margheri Mari Mariani Marilli Marinai Marinari Marinelli Marini Marino
Mariotti Marsili Martelli Martinelli Martini Martino Marzi Masi Masini
Masoni Massai Materassi Mattei Matteini Matteucci Matteuzzi Mattioli
Mattolini Matucci Mauro Mazzanti Mazzei Mazzetti Mazzi Mazzini Mazzocchi
Mazzoli Mazzoni Mazzuoli Meacci Mecocci Meini Melani Mele Meli Mengoni
Menichetti Meoni Merlini Messeri Messina Meucci Miccinesi Miceli Micheli
Michelini Michelozzi Migliori Migliorini Milani Miniati Misuri Monaco
Montagnani Montagni Montanari Montelatici Monti Montigiani Montini Morandi
Morandini Morelli Moretti Morganti Mori Morini Moroni Morozzi Mugnai
Mugnaini Mustafa Naldi Naldini Nannelli Nanni Nannini Nannucci Nardi
Nardini Nardoni Natali Ndiaye Nencetti Nencini Nencioni Neri Nesi Nesti
Niccolai Niccoli Niccolini Nigi Nistri Nocentini Noferini Novelli Nucci
Nuti Nutini Oliva Olivieri Olmi Orlandi Orlandini Orlando Orsini Ortolani
Ottanelli Pacciani Pace Paci Pacini Pagani Pagano Paggetti Pagliai Pagni
Pagnini Paladini Palagi Palchetti Palloni Palmieri Palumbo Pampaloni Pancani
Pandolfi Pandolfini Panerai Panichi Paoletti Paoli Paolini Papi Papini
Papucci Parenti Parigi Parisi Parri Parrini Pasquini Passeri Pecchioli
Pecorini Pellegrini Pepi Perini Perrone Peruzzi Pesci Pestelli Petri
Petrini Petrucci Pettini Pezzati Pezzatini Piani Piazza Piazzesi Piazzini
Piccardi Picchi Piccini Piccioli Pieraccini Pieraccioni Pieralli Pierattini
Pieri Pierini Pieroni Pietrini Pini Pinna Pinto Pinzani Pinzauti Piras
Pisani Pistolesi Poggesi Poggi Poggiali Poggiolini Poli Pollastri Porciani
Pozzi Pratellesi Pratesi Prosperi Pruneti Pucci Puccini Puccioni Pugi
Pugliese Puliti Querci Quercioli Raddi Radu Raffaelli Ragazzini Ranfagni
Ranieri Rastrelli Raugei Raveggi Renai Renzi Rettori Ricci Ricciardi
Ridi Ridolfi Rigacci Righi Righini Rinaldi Risaliti Ristori Rizzo Rocchi
Rocchini Rogai Romagnoli Romanelli Romani Romano Romei Romeo Romiti Romoli
Romolini Rontini Rosati Roselli Rosi Rossetti Rossi Rossini Rovai Ruggeri
Ruggiero Russo Sabatini Saccardi Sacchetti Sacchi Sacco Salerno Salimbeni
Salucci Salvadori Salvestrini Salvi Salvini Sanesi Sani Sanna Santi Santini
Santoni Santoro Santucci Sardi Sarri Sarti Sassi Sbolci Scali Scarpelli
Scarselli Scopetani Secci Selvi Senatori Senesi Serafini Sereni Serra
Sestini Sguanci Sieni Signorini Silvestri Simoncini Simonetti Simoni
Singh Sodi Soldi Somigli Sorbi Sorelli Sorrentino Sottili Spina Spinelli
Staccioli Staderini Stefanelli Stefani Stefanini Stella Susini Tacchi
Tacconi Taddei Tagliaferri Tamburini Tanganelli Tani Tanini Tapinassi
Tarchi Tarchiani Targioni Tassi Tassini Tempesti Terzani Tesi Testa Testi
Tilli Tinti Tirinnanzi Toccafondi Tofanari Tofani Tognaccini Tonelli
Tonini Torelli Torrini Tosi Toti Tozzi Trambusti Trapani Tucci Turchi
Ugolini Ulivi Valente Valenti Valentini Vangelisti Vanni Vannini Vannoni
Vannozzi Vannucchi Vannucci Ventura Venturi Venturini Vestri Vettori
Vichi Viciani Vieri Vigiani Vignoli Vignolini Vignozzi Villani Vinci
Visani Vitale Vitali Viti Viviani Vivoli Volpe Volpi Wang Wu Xu Yang Ye
Zagli Zani Zanieri Zanobini Zecchi Zetti Zhang Zheng Zhou Zhu Zingoni
Zini Zoppi
""".split()

LAST_NAMES: Dict[str, List[str]] = {"en": _LAST_EN, "it": _LAST_IT}

NATIONALITIES: List[Dict[str, str]] = [
    {"name": name}
    for name in """
Afghan Albanian Algerian American Andorran Angolan Antiguans Argentinean
Armenian Australian Austrian Azerbaijani Bahami Bahraini Bangladeshi
Barbadian Barbudans Batswana Belarusian Belgian Belizean Beninese Bhutanese
Bolivian Bosnian Brazilian British Bruneian Bulgarian Burkinabe Burmese
Burundian Cambodian Cameroonian Canadian Chadian Chilean Chinese Colombian
Comoran Congolese Croatian Cuban Cypriot Czech Danish Djibouti Dominican
Dutch Ecuadorean Egyptian Emirian Eritrean Estonian Ethiopian Fijian
Filipino Finnish French Gabonese Gambian Georgian German Ghanaian Greek
Grenadian Guatemalan Guinean Guyanese Haitian Herzegovinian Honduran
Hungarian Icelander Indian Indonesian Iranian Iraqi Irish Israeli Italian
Ivorian Jamaican Japanese Jordanian Kazakhstani Kenyan Kuwaiti Kyrgyz Laotian
Latvian Lebanese Liberian Libyan Liechtensteiner Lithuanian Luxembourger
Macedonian Malagasy Malawian Malaysian Maldivan Malian Maltese Marshallese
Mauritanian Mauritian Mexican Micronesian Moldovan Monacan Mongolian
Moroccan Mosotho Motswana Mozambican Namibian Nauruan Nepalese Nicaraguan
Nigerian Nigerien Norwegian Omani Pakistani Palauan Panamanian Paraguayan
Peruvian Polish Portuguese Qatari Romanian Russian Rwandan Salvadoran
Samoan Saudi Scottish Senegalese Serbian Seychellois Singaporean Slovakian
Slovenian Somali Spanish Sudanese Surinamer Swazi Swedish Swiss Syrian
Taiwanese Tajik Tanzanian Thai Togolese Tongan Tunisian Turkish Tuvaluan
Ugandan Ukrainian Uruguayan Uzbekistani Venezuelan Vietnamese Welsh Yemenite
Zambian Zimbabwean
""".split()
]
